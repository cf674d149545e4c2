"""A person, alive, dead, undead, or fictional."""

from __future__ import annotations

import datetime
import functools
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Sequence, Type

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.resource import Resource
from returns.result import Result

from .creative_work import ImageObject
from .equality import (
    EqualsResult,
    array_equals,
    boolean_equals,
    compare_properties,
    date_equals,
    maybe_equals,
    object_equals,
    strict_equals,
    union_equals,
)
from .json_schemas import (
    BlankNodeTermJson,
    LiteralTermJson,
    NamedNodeTermJson,
    PersonJson,
    RoleJson,
    ThingJson,
)
from .occupation import Occupation, Role
from .resource import (
    ResourceValueError,
    array_objects,
    array_values,
    as_date,
    as_iri,
    as_term,
    optional_string,
    optional_value,
)
from .thing import HasherT, Thing, without_none
from .types import (
    SCHEMA,
    Term,
    array,
    date_json,
    hash_string,
    hash_term,
    instance_of,
    iri_json,
    mutable_array,
    optional,
    term_json,
    to_date,
    to_named_node,
    to_string,
    to_term,
)
from .ui_schema import control, group, nested_scope

logger = logging.getLogger(__name__)


def term_from_json(term: BlankNodeTermJson | LiteralTermJson | NamedNodeTermJson) -> Term:
    if isinstance(term, LiteralTermJson):
        if term.language:
            return Literal(term.value, lang=term.language)
        datatype = URIRef(term.datatype) if term.datatype else None
        return Literal(term.value, datatype=datatype)
    if isinstance(term, NamedNodeTermJson):
        return URIRef(term.id)
    return BNode(term.id.removeprefix("_:"))


def occupation_or_role(item: Any) -> Occupation | Role:
    if isinstance(item, (Occupation, Role)):
        return item
    raise TypeError(f"Expected Occupation or Role, got {type(item).__name__}")


def occupation_or_role_from_rdf(
    resource: Resource,
    *,
    language_in: Sequence[str],
) -> Result[Occupation | Role, ResourceValueError]:
    """Try Occupation, then Role; each checks its own rdf:type."""
    def try_role(error: ResourceValueError) -> Result[Occupation | Role, ResourceValueError]:
        logger.debug("%r is not an Occupation: %r", resource.identifier, error)
        return Role.from_rdf(resource, language_in=language_in)

    return Occupation.from_rdf(resource, language_in=language_in).lash(try_role)


@dataclass(frozen=True, kw_only=True, eq=False)
class Person(Thing):
    birth_date: datetime.date | None = None
    family_name: str | None = None
    gender: Term | None = None
    given_name: str | None = None
    has_occupation: tuple[Occupation | Role, ...] = ()
    images: tuple[ImageObject, ...] = ()
    member_of: list[URIRef] = field(default_factory=list)

    type: ClassVar[str] = "Person"
    from_rdf_type: ClassVar[URIRef] = SCHEMA.Person
    json_model: ClassVar[Type[ThingJson]] = PersonJson

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set("birth_date", optional(self.birth_date, to_date))
        self._set("family_name", optional(self.family_name, to_string))
        self._set("gender", optional(self.gender, to_term))
        self._set("given_name", optional(self.given_name, to_string))
        self._set("has_occupation", array(self.has_occupation, occupation_or_role))
        self._set("images", array(self.images, instance_of(ImageObject)))
        self._set("member_of", mutable_array(self.member_of, to_named_node))

    def equals(self, other: Person) -> EqualsResult:
        return super().equals(other).bind(
            lambda _: compare_properties(self, other, [
                ("birth_date", maybe_equals(date_equals)),
                ("family_name", maybe_equals(strict_equals)),
                ("gender", maybe_equals(boolean_equals)),
                ("given_name", maybe_equals(strict_equals)),
                ("has_occupation", array_equals(union_equals)),
                ("images", array_equals(object_equals)),
                ("member_of", array_equals(boolean_equals)),
            ])
        )

    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        if self.birth_date is not None:
            hash_string(hasher, self.birth_date.isoformat())
        if self.family_name is not None:
            hash_string(hasher, self.family_name)
        if self.gender is not None:
            hash_term(hasher, self.gender)
        if self.given_name is not None:
            hash_string(hasher, self.given_name)
        for item in self.has_occupation:
            item.hash(hasher)
        hash_string(hasher, str(self.identifier))
        for item in self.images:
            item.hash(hasher)
        for item in self.member_of:
            hash_term(hasher, item)
        return hasher

    def to_json(self) -> dict[str, Any]:
        return without_none({
            **super().to_json(),
            "birthDate": date_json(self.birth_date) if self.birth_date is not None else None,
            "familyName": self.family_name,
            "gender": term_json(self.gender) if self.gender is not None else None,
            "givenName": self.given_name,
            "hasOccupation": [item.to_json() for item in self.has_occupation],
            "images": [item.to_json() for item in self.images],
            "memberOf": [iri_json(item) for item in self.member_of],
        })

    @classmethod
    def _properties_from_json(cls, json_model: PersonJson) -> dict[str, Any]:
        return {
            **super()._properties_from_json(json_model),
            "birth_date": json_model.birth_date,
            "family_name": json_model.family_name,
            "gender": term_from_json(json_model.gender) if json_model.gender is not None else None,
            "given_name": json_model.given_name,
            "has_occupation": [
                Role.from_json_model(item) if isinstance(item, RoleJson)
                else Occupation.from_json_model(item)
                for item in json_model.has_occupation
            ],
            "images": [ImageObject.from_json_model(item) for item in json_model.images],
            "member_of": [URIRef(item.id) for item in json_model.member_of],
        }

    def to_rdf(self, *, graph: Graph, ignore_rdf_type: bool = False) -> Resource:
        resource = super().to_rdf(graph=graph, ignore_rdf_type=ignore_rdf_type)
        if self.birth_date is not None:
            resource.add(SCHEMA.birthDate, Literal(self.birth_date))
        if self.family_name is not None:
            resource.add(SCHEMA.familyName, Literal(self.family_name))
        if self.gender is not None:
            resource.add(SCHEMA.gender, self.gender)
        if self.given_name is not None:
            resource.add(SCHEMA.givenName, Literal(self.given_name))
        for item in self.has_occupation:
            resource.add(SCHEMA.hasOccupation, item.to_rdf(graph=graph).identifier)
        for item in self.images:
            resource.add(SCHEMA.image, item.to_rdf(graph=graph).identifier)
        for item in self.member_of:
            resource.add(SCHEMA.memberOf, item)
        return resource

    @classmethod
    def _properties_from_rdf(
        cls,
        resource: Resource,
        *,
        language_in: Sequence[str],
    ) -> Result[dict[str, Any], ResourceValueError]:
        decode_occupation = functools.partial(occupation_or_role_from_rdf, language_in=language_in)
        decode_image = functools.partial(
            ImageObject.from_rdf, ignore_rdf_type=True, language_in=language_in
        )
        return super()._properties_from_rdf(resource, language_in=language_in).map(
            lambda properties: {
                **properties,
                "birth_date": optional_value(resource, SCHEMA.birthDate, as_date),
                "family_name": optional_string(resource, SCHEMA.familyName, language_in),
                "gender": optional_value(resource, SCHEMA.gender, as_term),
                "given_name": optional_string(resource, SCHEMA.givenName, language_in),
                "has_occupation": array_objects(resource, SCHEMA.hasOccupation, decode_occupation),
                "images": array_objects(resource, SCHEMA.image, decode_image),
                "member_of": list(array_values(resource, SCHEMA.memberOf, as_iri)),
            }
        )

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("Person", [
            Thing.json_ui_schema(scope_prefix),
            control(scope_prefix, "birthDate"),
            control(scope_prefix, "familyName"),
            control(scope_prefix, "gender"),
            control(scope_prefix, "givenName"),
            control(scope_prefix, "hasOccupation"),
            ImageObject.json_ui_schema(nested_scope(scope_prefix, "images")),
            control(scope_prefix, "memberOf"),
        ])
