"""Vocabulary namespace, RDF terms and input normalization.

Every model class stores its properties in one canonical shape:

  optional scalar   -> value or None
  named node        -> rdflib.URIRef
  array             -> tuple (or list, for the few explicitly mutable arrays)
  generic RDF term  -> rdflib.URIRef | rdflib.BNode | rdflib.Literal

Constructors accept a wider set of shapes (raw values, IRI strings,
``returns.maybe.Maybe`` containers) and funnel them through the helpers below.
"""

from __future__ import annotations

import datetime
from typing import Any, Callable, Iterable, Protocol, TypeVar

from rdflib import BNode, Literal, Namespace, URIRef, XSD
from rdflib.term import Node
from returns.maybe import Maybe


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

SCHEMA = Namespace("http://schema.org/")

T = TypeVar("T")
Term = URIRef | BNode | Literal


# ---------------------------------------------------------------------------
# Hasher (anything hashlib-like)
# ---------------------------------------------------------------------------

class Hasher(Protocol):
    """An incremental hash object, e.g. ``hashlib.sha256()``."""

    def update(self, data: bytes, /) -> None: ...


def hash_string(hasher: Hasher, value: str) -> None:
    hasher.update(value.encode("utf-8"))


def hash_term(hasher: Hasher, term: Node) -> None:
    """Feed an RDF term as its term type followed by its lexical value."""
    hash_string(hasher, term_type(term))
    hash_string(hasher, str(term))


def number_to_string(value: int | float) -> str:
    """Shortest decimal form: integral floats lose their trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# RDF term helpers
# ---------------------------------------------------------------------------

def term_type(term: Node) -> str:
    if isinstance(term, URIRef):
        return "NamedNode"
    if isinstance(term, BNode):
        return "BlankNode"
    if isinstance(term, Literal):
        return "Literal"
    raise TypeError(f"Unsupported RDF term: {term!r}")


def iri_json(node: URIRef) -> dict[str, str]:
    """The ``{"@id": ...}`` reference form of a named node."""
    return {"@id": str(node)}


def date_json(value: datetime.date) -> str:
    if isinstance(value, datetime.datetime):
        value = value.date()
    return value.isoformat()


def term_json(term: Term) -> dict[str, str]:
    """JSON form of a generic RDF term, tagged by ``termType``."""
    if isinstance(term, Literal):
        json_object = {"@value": str(term), "termType": "Literal"}
        if term.language:
            json_object["@language"] = term.language
        elif term.datatype is not None and term.datatype != XSD.string:
            json_object["@type"] = str(term.datatype)
        return json_object
    if isinstance(term, URIRef):
        return {"@id": str(term), "termType": "NamedNode"}
    return {"@id": f"_:{term}", "termType": "BlankNode"}


# ---------------------------------------------------------------------------
# Constructor input normalization
# ---------------------------------------------------------------------------

def unwrap_maybe(value: Any) -> Any:
    """Collapse a ``Maybe`` container to its value or None."""
    if isinstance(value, Maybe):
        return value.value_or(None)
    return value


def to_named_node(value: Any) -> URIRef:
    if not isinstance(value, str):
        raise TypeError(f"Expected an IRI or URIRef, got {type(value).__name__}")
    if not value:
        raise ValueError("An IRI must not be empty")
    return value if isinstance(value, URIRef) else URIRef(value)


def to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise TypeError(f"Expected a string, got {type(value).__name__}")


def to_date(value: Any) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def to_number(value: Any) -> int | float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    raise TypeError(f"Expected a number, got {type(value).__name__}")


def to_term(value: Any) -> Term:
    """Accept an RDF term or a Python primitive convertible to a literal."""
    if isinstance(value, URIRef):
        return to_named_node(value)
    if isinstance(value, (BNode, Literal)):
        return value
    if isinstance(value, str):
        return Literal(value)
    if isinstance(value, (bool, int, float, datetime.date)):
        return Literal(value)
    raise TypeError(f"Expected an RDF term or primitive, got {type(value).__name__}")


def instance_of(cls: type[T]) -> Callable[[Any], T]:
    def convert(value: Any) -> T:
        if isinstance(value, cls):
            return value
        raise TypeError(f"Expected {cls.__name__}, got {type(value).__name__}")

    return convert


def optional(value: Any, convert: Callable[[Any], T]) -> T | None:
    value = unwrap_maybe(value)
    if value is None:
        return None
    return convert(value)


def array(values: Iterable[Any] | None, convert: Callable[[Any], T]) -> tuple[T, ...]:
    if values is None:
        return ()
    if isinstance(values, (str, bytes)):
        raise TypeError("Expected an iterable of values, got a string")
    return tuple(convert(value) for value in values)


def mutable_array(values: Iterable[Any] | None, convert: Callable[[Any], T]) -> list[T]:
    return list(array(values, convert))
