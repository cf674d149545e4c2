"""Thing — root of the schema.org class hierarchy, and its abstract subtypes.

Every model class follows the same template:

  construct      keyword-only, inputs normalized to one canonical shape
  equals         structured EqualsResult, supertype properties first
  hash           feed an incremental hasher in declared property order
  to_json        JSON-compatible dict  /  from_json -> Result[cls, ValidationError]
  to_rdf         write into an rdflib Graph  /  from_rdf -> Result[cls, ResourceValueError]
  json_schema    JSON Schema of the JSON shape
  json_ui_schema declarative form layout

Subclasses extend each operation by delegating to the supertype and adding
their own properties.
"""

from __future__ import annotations

import hashlib
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Self, Sequence, Type, TypeVar

from pydantic import ValidationError
from rdflib import Graph, Literal, RDF, URIRef
from rdflib.resource import Resource
from returns.result import Failure, Result, Success

from .config import get_settings
from .equality import (
    EqualsResult,
    array_equals,
    boolean_equals,
    compare_properties,
    maybe_equals,
    strict_equals,
)
from .json_schemas import (
    EnumerationJson,
    IntangibleJson,
    StructuredValueJson,
    ThingJson,
)
from .resource import (
    MistypedValueError,
    ResourceValueError,
    array_values,
    as_iri,
    as_string,
    identifier_to_string,
    is_instance_of,
    optional_string,
    optional_value,
)
from .types import (
    SCHEMA,
    Hasher,
    array,
    hash_string,
    hash_term,
    iri_json,
    optional,
    to_named_node,
    to_string,
)
from .ui_schema import control, group, hidden_control

logger = logging.getLogger(__name__)

HasherT = TypeVar("HasherT", bound=Hasher)


def without_none(json_object: dict[str, Any]) -> dict[str, Any]:
    """Drop absent optional properties from a JSON object."""
    return {key: value for key, value in json_object.items() if value is not None}


def synthesize_identifier(thing: Thing) -> URIRef:
    """Derive a deterministic identifier from the object's content hash."""
    digest = thing.hash(hashlib.sha256()).hexdigest()
    identifier = URIRef(f"{get_settings().identifier_prefix}{thing.type}:{digest}")
    logger.debug("Synthesized identifier %s", identifier)
    return identifier


# ---------------------------------------------------------------------------
# Thing
# ---------------------------------------------------------------------------

@dataclass(frozen=True, kw_only=True, eq=False)
class Thing(ABC):
    """The most generic schema.org type.

    Instances are immutable: ``__post_init__`` normalizes every property in
    place, after which attributes cannot be reassigned.
    """

    identifier: URIRef
    description: str | None = None
    identifiers: tuple[str, ...] = ()
    name: str | None = None
    same_as: tuple[URIRef, ...] = ()
    url: URIRef | None = None

    json_model: ClassVar[Type[ThingJson]] = ThingJson
    from_rdf_type: ClassVar[URIRef | None] = None

    @property
    @abstractmethod
    def type(self) -> str:
        """Discriminant naming the concrete class."""

    def __post_init__(self) -> None:
        self._set("identifier", self._normalize_identifier(self.identifier))
        self._set("description", optional(self.description, to_string))
        self._set("identifiers", array(self.identifiers, to_string))
        self._set("name", optional(self.name, to_string))
        self._set("same_as", array(self.same_as, to_named_node))
        self._set("url", optional(self.url, to_named_node))

    def _set(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    def _normalize_identifier(self, identifier: Any) -> URIRef | None:
        return to_named_node(identifier)

    # -----------------------------------------------------------------------
    # Equality and hashing
    # -----------------------------------------------------------------------

    def equals(self, other: Thing) -> EqualsResult:
        return compare_properties(self, other, [
            ("description", maybe_equals(strict_equals)),
            ("identifier", boolean_equals),
            ("identifiers", array_equals(strict_equals)),
            ("name", maybe_equals(strict_equals)),
            ("same_as", array_equals(boolean_equals)),
            ("type", strict_equals),
            ("url", maybe_equals(boolean_equals)),
        ])

    def hash(self, hasher: HasherT) -> HasherT:
        if self.description is not None:
            hash_string(hasher, self.description)
        for item in self.identifiers:
            hash_string(hasher, item)
        if self.name is not None:
            hash_string(hasher, self.name)
        for item in self.same_as:
            hash_term(hasher, item)
        if self.url is not None:
            hash_term(hasher, self.url)
        return hasher

    # -----------------------------------------------------------------------
    # JSON
    # -----------------------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        return without_none({
            "description": self.description,
            "@id": str(self.identifier),
            "identifiers": list(self.identifiers),
            "name": self.name,
            "sameAs": [iri_json(item) for item in self.same_as],
            "type": self.type,
            "url": iri_json(self.url) if self.url is not None else None,
        })

    @classmethod
    def from_json(cls, json_object: Any) -> Result[Self, ValidationError]:
        """Validate a JSON object and construct an instance from it."""
        try:
            validated = cls.json_model.model_validate(json_object)
        except ValidationError as error:
            logger.debug("Invalid %s JSON: %s", cls.__name__, error)
            return Failure(error)
        return Success(cls.from_json_model(validated))

    @classmethod
    def from_json_model(cls, json_model: ThingJson) -> Self:
        """Construct an instance from an already validated JSON model."""
        return cls(**cls._properties_from_json(json_model))

    @classmethod
    def _properties_from_json(cls, json_model: ThingJson) -> dict[str, Any]:
        return {
            "description": json_model.description,
            "identifier": URIRef(json_model.id),
            "identifiers": json_model.identifiers,
            "name": json_model.name,
            "same_as": [URIRef(item.id) for item in json_model.same_as],
            "url": URIRef(json_model.url.id) if json_model.url is not None else None,
        }

    def __str__(self) -> str:
        return json.dumps(self.to_json())

    # -----------------------------------------------------------------------
    # RDF
    # -----------------------------------------------------------------------

    def to_rdf(self, *, graph: Graph, ignore_rdf_type: bool = False) -> Resource:
        """Write this object into ``graph`` and return its resource.

        ``ignore_rdf_type`` suppresses the rdf:type triple.
        """
        resource = Resource(graph, self.identifier)
        if not ignore_rdf_type and self.from_rdf_type is not None:
            resource.add(RDF.type, self.from_rdf_type)
        if self.description is not None:
            resource.add(SCHEMA.description, Literal(self.description))
        for item in self.identifiers:
            resource.add(SCHEMA.identifier, Literal(item))
        if self.name is not None:
            resource.add(SCHEMA.name, Literal(self.name))
        for item in self.same_as:
            resource.add(SCHEMA.sameAs, item)
        if self.url is not None:
            resource.add(SCHEMA.url, self.url)
        return resource

    @classmethod
    def from_rdf(
        cls,
        resource: Resource,
        *,
        ignore_rdf_type: bool = False,
        language_in: Sequence[str] | None = None,
    ) -> Result[Self, ResourceValueError]:
        """Read an instance from ``resource``.

        Unless ``ignore_rdf_type`` is set the resource must be typed with the
        class's ``from_rdf_type``. ``language_in`` orders the preferred
        languages of string literals; it defaults to the configured preference.
        """
        if language_in is None:
            language_in = get_settings().language_in
        if (
            not ignore_rdf_type
            and cls.from_rdf_type is not None
            and not is_instance_of(resource, cls.from_rdf_type)
        ):
            return Failure(ResourceValueError(
                focus_resource=resource,
                predicate=cls.from_rdf_type,
                message=f"{identifier_to_string(resource.identifier)} has unexpected RDF type",
            ))
        return cls._properties_from_rdf(resource, language_in=language_in).map(
            lambda properties: cls(**properties)
        )

    @classmethod
    def _properties_from_rdf(
        cls,
        resource: Resource,
        *,
        language_in: Sequence[str],
    ) -> Result[dict[str, Any], ResourceValueError]:
        if as_iri(resource.identifier) is None:
            return Failure(MistypedValueError(
                focus_resource=resource,
                predicate=RDF.subject,
                actual_value=resource.identifier,
                expected_value_type="URIRef",
            ))
        return Success({
            "description": optional_string(resource, SCHEMA.description, language_in),
            "identifier": resource.identifier,
            "identifiers": array_values(resource, SCHEMA.identifier, as_string),
            "name": optional_string(resource, SCHEMA.name, language_in),
            "same_as": array_values(resource, SCHEMA.sameAs, as_iri),
            "url": optional_value(resource, SCHEMA.url, as_iri),
        })

    # -----------------------------------------------------------------------
    # Schemas
    # -----------------------------------------------------------------------

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        return cls.json_model.model_json_schema(by_alias=True)

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("Thing", [
            control(scope_prefix, "description"),
            control(scope_prefix, "@id", label="Identifier"),
            control(scope_prefix, "identifiers"),
            control(scope_prefix, "name"),
            control(scope_prefix, "sameAs"),
            hidden_control(scope_prefix, "type", "Thing"),
            control(scope_prefix, "url"),
        ])


# ---------------------------------------------------------------------------
# Abstract subtypes without properties of their own
# ---------------------------------------------------------------------------

@dataclass(frozen=True, kw_only=True, eq=False)
class Intangible(Thing):
    """A utility class for intangible things such as quantities and roles."""

    json_model: ClassVar[Type[ThingJson]] = IntangibleJson

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("Intangible", [Thing.json_ui_schema(scope_prefix)])


@dataclass(frozen=True, kw_only=True, eq=False)
class StructuredValue(Intangible):
    json_model: ClassVar[Type[ThingJson]] = StructuredValueJson

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("StructuredValue", [Intangible.json_ui_schema(scope_prefix)])


@dataclass(frozen=True, kw_only=True, eq=False)
class Enumeration(Intangible):
    """Lists or enumerations, e.g. the genders."""

    json_model: ClassVar[Type[ThingJson]] = EnumerationJson

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("Enumeration", [Intangible.json_ui_schema(scope_prefix)])
