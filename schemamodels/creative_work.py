"""CreativeWork and its media subtypes.

MediaObject carries the nested ``height`` and ``width`` quantities. They are
written as their own resources and linked by identifier, and read back without
checking their rdf:type.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, Type

from rdflib import Graph, Literal, URIRef
from rdflib.resource import Resource
from returns.result import Result

from .equality import (
    EqualsResult,
    array_equals,
    boolean_equals,
    compare_properties,
    maybe_equals,
    object_equals,
    strict_equals,
)
from .json_schemas import CreativeWorkJson, ImageObjectJson, MediaObjectJson, ThingJson
from .quantitative_value import QuantitiveValue
from .resource import (
    ResourceValueError,
    array_values,
    as_iri,
    optional_object,
    optional_string,
    optional_value,
)
from .thing import HasherT, Thing, without_none
from .types import (
    SCHEMA,
    array,
    hash_string,
    hash_term,
    instance_of,
    iri_json,
    optional,
    to_named_node,
    to_string,
)
from .ui_schema import control, group, nested_scope


@dataclass(frozen=True, kw_only=True, eq=False)
class CreativeWork(Thing):
    is_based_on: tuple[URIRef, ...] = ()

    json_model: ClassVar[Type[ThingJson]] = CreativeWorkJson

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set("is_based_on", array(self.is_based_on, to_named_node))

    def equals(self, other: CreativeWork) -> EqualsResult:
        return super().equals(other).bind(
            lambda _: compare_properties(self, other, [
                ("is_based_on", array_equals(boolean_equals)),
            ])
        )

    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        for item in self.is_based_on:
            hash_term(hasher, item)
        return hasher

    def to_json(self) -> dict[str, Any]:
        return {
            **super().to_json(),
            "isBasedOn": [iri_json(item) for item in self.is_based_on],
        }

    @classmethod
    def _properties_from_json(cls, json_model: CreativeWorkJson) -> dict[str, Any]:
        return {
            **super()._properties_from_json(json_model),
            "is_based_on": [URIRef(item.id) for item in json_model.is_based_on],
        }

    def to_rdf(self, *, graph: Graph, ignore_rdf_type: bool = False) -> Resource:
        resource = super().to_rdf(graph=graph, ignore_rdf_type=ignore_rdf_type)
        for item in self.is_based_on:
            resource.add(SCHEMA.isBasedOn, item)
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
                "is_based_on": array_values(resource, SCHEMA.isBasedOn, as_iri),
            }
        )

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("CreativeWork", [
            Thing.json_ui_schema(scope_prefix),
            control(scope_prefix, "isBasedOn"),
        ])


@dataclass(frozen=True, kw_only=True, eq=False)
class MediaObject(CreativeWork):
    """A media file: image, video or audio object."""

    content_url: URIRef | None = None
    encoding_format: str | None = None
    height: QuantitiveValue | None = None
    width: QuantitiveValue | None = None

    json_model: ClassVar[Type[ThingJson]] = MediaObjectJson

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set("content_url", optional(self.content_url, to_named_node))
        self._set("encoding_format", optional(self.encoding_format, to_string))
        self._set("height", optional(self.height, instance_of(QuantitiveValue)))
        self._set("width", optional(self.width, instance_of(QuantitiveValue)))

    def equals(self, other: MediaObject) -> EqualsResult:
        return super().equals(other).bind(
            lambda _: compare_properties(self, other, [
                ("content_url", maybe_equals(boolean_equals)),
                ("encoding_format", maybe_equals(strict_equals)),
                ("height", maybe_equals(object_equals)),
                ("width", maybe_equals(object_equals)),
            ])
        )

    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        if self.content_url is not None:
            hash_term(hasher, self.content_url)
        if self.encoding_format is not None:
            hash_string(hasher, self.encoding_format)
        if self.height is not None:
            self.height.hash(hasher)
        if self.width is not None:
            self.width.hash(hasher)
        return hasher

    def to_json(self) -> dict[str, Any]:
        return without_none({
            **super().to_json(),
            "contentUrl": iri_json(self.content_url) if self.content_url is not None else None,
            "encodingFormat": self.encoding_format,
            "height": self.height.to_json() if self.height is not None else None,
            "width": self.width.to_json() if self.width is not None else None,
        })

    @classmethod
    def _properties_from_json(cls, json_model: MediaObjectJson) -> dict[str, Any]:
        return {
            **super()._properties_from_json(json_model),
            "content_url": (
                URIRef(json_model.content_url.id) if json_model.content_url is not None else None
            ),
            "encoding_format": json_model.encoding_format,
            "height": (
                QuantitiveValue.from_json_model(json_model.height)
                if json_model.height is not None else None
            ),
            "width": (
                QuantitiveValue.from_json_model(json_model.width)
                if json_model.width is not None else None
            ),
        }

    def to_rdf(self, *, graph: Graph, ignore_rdf_type: bool = False) -> Resource:
        resource = super().to_rdf(graph=graph, ignore_rdf_type=ignore_rdf_type)
        if self.content_url is not None:
            resource.add(SCHEMA.contentUrl, self.content_url)
        if self.encoding_format is not None:
            resource.add(SCHEMA.encodingFormat, Literal(self.encoding_format))
        if self.height is not None:
            resource.add(SCHEMA.height, self.height.to_rdf(graph=graph).identifier)
        if self.width is not None:
            resource.add(SCHEMA.width, self.width.to_rdf(graph=graph).identifier)
        return resource

    @classmethod
    def _properties_from_rdf(
        cls,
        resource: Resource,
        *,
        language_in: Sequence[str],
    ) -> Result[dict[str, Any], ResourceValueError]:
        decode_quantity = functools.partial(
            QuantitiveValue.from_rdf, ignore_rdf_type=True, language_in=language_in
        )
        return super()._properties_from_rdf(resource, language_in=language_in).map(
            lambda properties: {
                **properties,
                "content_url": optional_value(resource, SCHEMA.contentUrl, as_iri),
                "encoding_format": optional_string(resource, SCHEMA.encodingFormat, language_in),
                "height": optional_object(resource, SCHEMA.height, decode_quantity),
                "width": optional_object(resource, SCHEMA.width, decode_quantity),
            }
        )

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("MediaObject", [
            CreativeWork.json_ui_schema(scope_prefix),
            control(scope_prefix, "contentUrl"),
            control(scope_prefix, "encodingFormat"),
            QuantitiveValue.json_ui_schema(nested_scope(scope_prefix, "height")),
            QuantitiveValue.json_ui_schema(nested_scope(scope_prefix, "width")),
        ])


@dataclass(frozen=True, kw_only=True, eq=False)
class ImageObject(MediaObject):
    """An image file."""

    type: ClassVar[str] = "ImageObject"
    from_rdf_type: ClassVar[URIRef] = SCHEMA.ImageObject
    json_model: ClassVar[Type[ThingJson]] = ImageObjectJson

    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        hash_string(hasher, str(self.identifier))
        return hasher

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("ImageObject", [MediaObject.json_ui_schema(scope_prefix)])
