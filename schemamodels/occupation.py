"""Occupation and Role — the two shapes a person's ``hasOccupation`` can take.

A Role qualifies a relationship with dates and a role name. Roles are often
anonymous, so a Role without an explicit identifier derives one from its
content hash.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, Type

from rdflib import Graph, Literal, URIRef
from rdflib.resource import Resource
from returns.result import Result

from .equality import (
    EqualsResult,
    boolean_equals,
    compare_properties,
    date_equals,
    maybe_equals,
)
from .json_schemas import OccupationJson, RoleJson, ThingJson
from .resource import ResourceValueError, as_date, as_iri, optional_value
from .thing import HasherT, Intangible, synthesize_identifier, without_none
from .types import (
    SCHEMA,
    date_json,
    hash_string,
    hash_term,
    iri_json,
    optional,
    to_date,
    to_named_node,
)
from .ui_schema import control, group


@dataclass(frozen=True, kw_only=True, eq=False)
class Occupation(Intangible):
    """A profession, may involve prolonged training and/or a formal qualification."""

    type: ClassVar[str] = "Occupation"
    from_rdf_type: ClassVar[URIRef] = SCHEMA.Occupation
    json_model: ClassVar[Type[ThingJson]] = OccupationJson

    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        hash_string(hasher, str(self.identifier))
        return hasher

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("Occupation", [Intangible.json_ui_schema(scope_prefix)])


@dataclass(frozen=True, kw_only=True, eq=False)
class Role(Intangible):
    """Additional information about a relationship, e.g. when a job was held."""

    identifier: URIRef | None = None
    end_date: datetime.date | None = None
    role_name: URIRef | None = None
    start_date: datetime.date | None = None

    type: ClassVar[str] = "Role"
    from_rdf_type: ClassVar[URIRef] = SCHEMA.Role
    json_model: ClassVar[Type[ThingJson]] = RoleJson

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set("end_date", optional(self.end_date, to_date))
        self._set("role_name", optional(self.role_name, to_named_node))
        self._set("start_date", optional(self.start_date, to_date))
        if self.identifier is None:
            self._set("identifier", synthesize_identifier(self))

    def _normalize_identifier(self, identifier: Any) -> URIRef | None:
        return optional(identifier, to_named_node)

    def equals(self, other: Role) -> EqualsResult:
        return super().equals(other).bind(
            lambda _: compare_properties(self, other, [
                ("end_date", maybe_equals(date_equals)),
                ("role_name", maybe_equals(boolean_equals)),
                ("start_date", maybe_equals(date_equals)),
            ])
        )

    # The identifier is left out: it may itself be derived from this hash.
    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        if self.end_date is not None:
            hash_string(hasher, self.end_date.isoformat())
        if self.role_name is not None:
            hash_term(hasher, self.role_name)
        if self.start_date is not None:
            hash_string(hasher, self.start_date.isoformat())
        return hasher

    def to_json(self) -> dict[str, Any]:
        return without_none({
            **super().to_json(),
            "endDate": date_json(self.end_date) if self.end_date is not None else None,
            "roleName": iri_json(self.role_name) if self.role_name is not None else None,
            "startDate": date_json(self.start_date) if self.start_date is not None else None,
        })

    @classmethod
    def _properties_from_json(cls, json_model: RoleJson) -> dict[str, Any]:
        return {
            **super()._properties_from_json(json_model),
            "end_date": json_model.end_date,
            "role_name": URIRef(json_model.role_name.id) if json_model.role_name is not None else None,
            "start_date": json_model.start_date,
        }

    def to_rdf(self, *, graph: Graph, ignore_rdf_type: bool = False) -> Resource:
        resource = super().to_rdf(graph=graph, ignore_rdf_type=ignore_rdf_type)
        if self.end_date is not None:
            resource.add(SCHEMA.endDate, Literal(self.end_date))
        if self.role_name is not None:
            resource.add(SCHEMA.roleName, self.role_name)
        if self.start_date is not None:
            resource.add(SCHEMA.startDate, Literal(self.start_date))
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
                "end_date": optional_value(resource, SCHEMA.endDate, as_date),
                "role_name": optional_value(resource, SCHEMA.roleName, as_iri),
                "start_date": optional_value(resource, SCHEMA.startDate, as_date),
            }
        )

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("Role", [
            Intangible.json_ui_schema(scope_prefix),
            control(scope_prefix, "endDate"),
            control(scope_prefix, "roleName"),
            control(scope_prefix, "startDate"),
        ])
