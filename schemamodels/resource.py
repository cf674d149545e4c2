"""Reading typed property values off an RDF subject.

A resource is an ``rdflib.resource.Resource``: a subject together with the
graph holding its outgoing triples. The readers below never raise on bad data.
Optional properties take the first value of the right kind; array properties
collect every distinct value of the right kind; values of the wrong kind are
skipped. Structural problems (wrong rdf:type, wrong subject kind) are reported
as ``ResourceValueError`` inside a ``returns.result.Failure``.
"""

from __future__ import annotations

import datetime
import logging
from typing import Callable, Sequence, TypeVar

from rdflib import BNode, Literal, RDF, RDFS, URIRef
from rdflib.resource import Resource
from rdflib.term import Node
from returns.pipeline import is_successful
from returns.result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ResourceValueError(Exception):
    """A resource does not have the shape a model class expects.

    Returned (not raised) by ``from_rdf``; callers may raise it themselves.
    """

    def __init__(self, *, focus_resource: Resource, predicate: URIRef, message: str):
        super().__init__(message)
        self.focus_resource = focus_resource
        self.predicate = predicate
        self.message = message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({identifier_to_string(self.focus_resource.identifier)} "
            f"{self.predicate.n3()}: {self.message})"
        )


class MistypedValueError(ResourceValueError):
    """A value is present but of the wrong kind."""

    def __init__(
        self,
        *,
        focus_resource: Resource,
        predicate: URIRef,
        actual_value: Node,
        expected_value_type: str,
    ):
        super().__init__(
            focus_resource=focus_resource,
            predicate=predicate,
            message=f"expected {expected_value_type}, got {actual_value!r}",
        )
        self.actual_value = actual_value
        self.expected_value_type = expected_value_type


def identifier_to_string(identifier: Node) -> str:
    if isinstance(identifier, BNode):
        return f"_:{identifier}"
    return f"<{identifier}>"


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def values(resource: Resource, predicate: URIRef) -> list[Node]:
    """Distinct objects of ``predicate`` on the resource, in graph order."""
    seen: set[Node] = set()
    result: list[Node] = []
    for value in resource.graph.objects(resource.identifier, predicate):
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def is_instance_of(resource: Resource, rdf_type: URIRef) -> bool:
    """Whether the resource has ``rdf_type`` directly or via rdfs:subClassOf."""
    graph = resource.graph
    for asserted_type in graph.objects(resource.identifier, RDF.type):
        if asserted_type == rdf_type:
            return True
        if rdf_type in graph.transitive_objects(asserted_type, RDFS.subClassOf):
            return True
    return False


# ---------------------------------------------------------------------------
# Value conversions (None = not convertible)
# ---------------------------------------------------------------------------

def as_iri(value: Node) -> URIRef | None:
    return value if isinstance(value, URIRef) and value else None


def as_string(value: Node) -> str | None:
    return str(value) if isinstance(value, Literal) else None


def as_date(value: Node) -> datetime.date | None:
    if not isinstance(value, Literal):
        return None
    python_value = value.toPython()
    if isinstance(python_value, datetime.datetime):
        return python_value.date()
    if isinstance(python_value, datetime.date):
        return python_value
    return None


def as_number(value: Node) -> int | float | None:
    if not isinstance(value, Literal):
        return None
    python_value = value.toPython()
    if isinstance(python_value, bool):
        return None
    if isinstance(python_value, (int, float)):
        return python_value
    try:
        return int(python_value)
    except (TypeError, ValueError):
        pass
    try:
        return float(python_value)
    except (TypeError, ValueError):
        return None


def as_term(value: Node) -> URIRef | BNode | Literal | None:
    if isinstance(value, URIRef):
        return as_iri(value)
    return value if isinstance(value, (BNode, Literal)) else None


# ---------------------------------------------------------------------------
# Property readers
# ---------------------------------------------------------------------------

def optional_value(
    resource: Resource,
    predicate: URIRef,
    convert: Callable[[Node], T | None],
) -> T | None:
    for value in values(resource, predicate):
        converted = convert(value)
        if converted is not None:
            return converted
        logger.debug(
            "Skipping %r on %s %s: not convertible",
            value, identifier_to_string(resource.identifier), predicate.n3(),
        )
    return None


def array_values(
    resource: Resource,
    predicate: URIRef,
    convert: Callable[[Node], T | None],
) -> tuple[T, ...]:
    result = []
    for value in values(resource, predicate):
        converted = convert(value)
        if converted is None:
            logger.debug(
                "Skipping %r on %s %s: not convertible",
                value, identifier_to_string(resource.identifier), predicate.n3(),
            )
            continue
        result.append(converted)
    return tuple(result)


def optional_string(
    resource: Resource,
    predicate: URIRef,
    language_in: Sequence[str] | None = None,
) -> str | None:
    """First string value, preferring literals whose language is listed earliest.

    ``""`` in ``language_in`` stands for literals without a language tag. When
    a preference is given and nothing matches, no value is returned.
    """
    literals = [value for value in values(resource, predicate) if isinstance(value, Literal)]
    if not language_in:
        return str(literals[0]) if literals else None
    for language in language_in:
        for literal in literals:
            if (literal.language or "") == language:
                return str(literal)
    return None


def _object_resources(resource: Resource, predicate: URIRef) -> list[Resource]:
    resources = []
    for value in values(resource, predicate):
        if isinstance(value, Literal):
            logger.debug(
                "Skipping literal %r on %s %s: expected a resource",
                value, identifier_to_string(resource.identifier), predicate.n3(),
            )
            continue
        resources.append(Resource(resource.graph, value))
    return resources


def optional_object(
    resource: Resource,
    predicate: URIRef,
    decode: Callable[[Resource], Result[T, ResourceValueError]],
) -> T | None:
    """First nested object that decodes; undecodable ones are skipped."""
    for nested in _object_resources(resource, predicate):
        result = decode(nested)
        if is_successful(result):
            return result.unwrap()
        logger.debug("Skipping nested %r: %r", nested.identifier, result.failure())
    return None


def array_objects(
    resource: Resource,
    predicate: URIRef,
    decode: Callable[[Resource], Result[T, ResourceValueError]],
) -> tuple[T, ...]:
    result_objects = []
    for nested in _object_resources(resource, predicate):
        result = decode(nested)
        if is_successful(result):
            result_objects.append(result.unwrap())
        else:
            logger.debug("Skipping nested %r: %r", nested.identifier, result.failure())
    return tuple(result_objects)
