"""Organization — a school, NGO, corporation, club, etc.

Membership links are plain references and may be edited in place after
construction; every other property is fixed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Sequence, Type

from rdflib import Graph, URIRef
from rdflib.resource import Resource
from returns.result import Result

from .equality import EqualsResult, array_equals, boolean_equals, compare_properties
from .json_schemas import OrganizationJson, ThingJson
from .resource import ResourceValueError, array_values, as_iri
from .thing import HasherT, Thing
from .types import SCHEMA, hash_string, hash_term, iri_json, mutable_array, to_named_node
from .ui_schema import control, group

# (attribute, JSON key, predicate)
_REFERENCE_PROPERTIES = (
    ("members", "members", SCHEMA.member),
    ("parent_organizations", "parentOrganizations", SCHEMA.parentOrganization),
    ("sub_organizations", "subOrganizations", SCHEMA.subOrganization),
)


@dataclass(frozen=True, kw_only=True, eq=False)
class Organization(Thing):
    members: list[URIRef] = field(default_factory=list)
    parent_organizations: list[URIRef] = field(default_factory=list)
    sub_organizations: list[URIRef] = field(default_factory=list)

    type: ClassVar[str] = "Organization"
    from_rdf_type: ClassVar[URIRef] = SCHEMA.Organization
    json_model: ClassVar[Type[ThingJson]] = OrganizationJson

    def __post_init__(self) -> None:
        super().__post_init__()
        for attribute, _, _ in _REFERENCE_PROPERTIES:
            self._set(attribute, mutable_array(getattr(self, attribute), to_named_node))

    def equals(self, other: Organization) -> EqualsResult:
        return super().equals(other).bind(
            lambda _: compare_properties(self, other, [
                (attribute, array_equals(boolean_equals))
                for attribute, _, _ in _REFERENCE_PROPERTIES
            ])
        )

    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        hash_string(hasher, str(self.identifier))
        for attribute, _, _ in _REFERENCE_PROPERTIES:
            for item in getattr(self, attribute):
                hash_term(hasher, item)
        return hasher

    def to_json(self) -> dict[str, Any]:
        json_object = super().to_json()
        for attribute, key, _ in _REFERENCE_PROPERTIES:
            json_object[key] = [iri_json(item) for item in getattr(self, attribute)]
        return json_object

    @classmethod
    def _properties_from_json(cls, json_model: OrganizationJson) -> dict[str, Any]:
        properties = super()._properties_from_json(json_model)
        for attribute, _, _ in _REFERENCE_PROPERTIES:
            properties[attribute] = [URIRef(item.id) for item in getattr(json_model, attribute)]
        return properties

    def to_rdf(self, *, graph: Graph, ignore_rdf_type: bool = False) -> Resource:
        resource = super().to_rdf(graph=graph, ignore_rdf_type=ignore_rdf_type)
        for attribute, _, predicate in _REFERENCE_PROPERTIES:
            for item in getattr(self, attribute):
                resource.add(predicate, item)
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
                **{
                    attribute: list(array_values(resource, predicate, as_iri))
                    for attribute, _, predicate in _REFERENCE_PROPERTIES
                },
            }
        )

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("Organization", [
            Thing.json_ui_schema(scope_prefix),
            *(control(scope_prefix, key) for _, key, _ in _REFERENCE_PROPERTIES),
        ])
