"""UI schema — declarative form layout for the JSON shape of a model class.

The layout follows JSON Forms conventions: a ``Group`` per class whose
elements are ``Control``s scoped to JSON Schema pointers
(``#/properties/<key>``). A subclass group embeds its supertype's group first,
so the layout mirrors the class hierarchy.
"""

from __future__ import annotations

from typing import Any


def control(scope_prefix: str, key: str, label: str | None = None) -> dict[str, Any]:
    element: dict[str, Any] = {"scope": f"{scope_prefix}/properties/{key}", "type": "Control"}
    if label is not None:
        element["label"] = label
    return element


def hidden_control(scope_prefix: str, key: str, const: str) -> dict[str, Any]:
    """A control hidden while the property holds ``const``."""
    scope = f"{scope_prefix}/properties/{key}"
    return {
        "rule": {
            "condition": {"schema": {"const": const}, "scope": scope},
            "effect": "HIDE",
        },
        "scope": scope,
        "type": "Control",
    }


def group(label: str, elements: list[dict[str, Any]]) -> dict[str, Any]:
    return {"elements": elements, "label": label, "type": "Group"}


def nested_scope(scope_prefix: str, key: str) -> str:
    """Scope prefix for an embedded object-valued property."""
    return f"{scope_prefix}/properties/{key}"
