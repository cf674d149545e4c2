"""QuantitiveValue: a point value, e.g. the height of an image in pixels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, Type

from rdflib import Graph, Literal, URIRef
from rdflib.resource import Resource
from returns.result import Result

from .equality import EqualsResult, compare_properties, maybe_equals, strict_equals
from .json_schemas import QuantitiveValueJson, ThingJson
from .resource import ResourceValueError, as_number, optional_value
from .thing import HasherT, StructuredValue, without_none
from .types import SCHEMA, hash_string, number_to_string, optional, to_number
from .ui_schema import control, group


@dataclass(frozen=True, kw_only=True, eq=False)
class QuantitiveValue(StructuredValue):
    value: int | float | None = None

    type: ClassVar[str] = "QuantitiveValue"
    from_rdf_type: ClassVar[URIRef] = SCHEMA.QuantitativeValue
    json_model: ClassVar[Type[ThingJson]] = QuantitiveValueJson

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set("value", optional(self.value, to_number))

    def equals(self, other: QuantitiveValue) -> EqualsResult:
        return super().equals(other).bind(
            lambda _: compare_properties(self, other, [
                ("value", maybe_equals(strict_equals)),
            ])
        )

    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        hash_string(hasher, str(self.identifier))
        if self.value is not None:
            hash_string(hasher, number_to_string(self.value))
        return hasher

    def to_json(self) -> dict[str, Any]:
        return without_none({**super().to_json(), "value": self.value})

    @classmethod
    def _properties_from_json(cls, json_model: QuantitiveValueJson) -> dict[str, Any]:
        return {**super()._properties_from_json(json_model), "value": json_model.value}

    def to_rdf(self, *, graph: Graph, ignore_rdf_type: bool = False) -> Resource:
        resource = super().to_rdf(graph=graph, ignore_rdf_type=ignore_rdf_type)
        if self.value is not None:
            resource.add(SCHEMA.value, Literal(self.value))
        return resource

    @classmethod
    def _properties_from_rdf(
        cls,
        resource: Resource,
        *,
        language_in: Sequence[str],
    ) -> Result[dict[str, Any], ResourceValueError]:
        return super()._properties_from_rdf(resource, language_in=language_in).map(
            lambda properties: {
                **properties,
                "value": optional_value(resource, SCHEMA.value, as_number),
            }
        )

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("QuantitiveValue", [
            StructuredValue.json_ui_schema(scope_prefix),
            control(scope_prefix, "value"),
        ])
