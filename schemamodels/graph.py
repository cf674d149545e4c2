"""Graph-level helpers for decoding every instance of a model class in a graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Sequence, Type, TypeVar

from rdflib import Graph, RDF, RDFS
from rdflib.resource import Resource
from rdflib.term import Node
from returns.pipeline import is_successful

from .resource import ResourceValueError, identifier_to_string
from .thing import Thing

logger = logging.getLogger(__name__)

ThingT = TypeVar("ThingT", bound=Thing)


@dataclass
class GraphInstances(Generic[ThingT]):
    """Instances decoded from a graph, and the subjects that failed to decode."""
    instances: list[ThingT] = field(default_factory=list)
    failures: list[ResourceValueError] = field(default_factory=list)

    def summary(self) -> str:
        lines = [f"Decoded {len(self.instances)} instance(s), {len(self.failures)} failure(s)"]
        for failure in self.failures:
            lines.append(
                f"  - {identifier_to_string(failure.focus_resource.identifier)}: {failure.message}"
            )
        return "\n".join(lines)


def typed_subjects(graph: Graph, rdf_type: Node) -> list[Node]:
    """Subjects typed ``rdf_type`` or one of its rdfs:subClassOf descendants."""
    subjects = set()
    for subclass in graph.transitive_subjects(RDFS.subClassOf, rdf_type):
        subjects.update(graph.subjects(RDF.type, subclass))
    return sorted(subjects, key=str)


def instances_from_graph(
    graph: Graph,
    cls: Type[ThingT],
    language_in: Sequence[str] | None = None,
) -> GraphInstances[ThingT]:
    """Decode every subject in ``graph`` typed with ``cls.from_rdf_type``."""
    if cls.from_rdf_type is None:
        raise TypeError(f"{cls.__name__} is abstract and has no RDF type")

    result: GraphInstances[ThingT] = GraphInstances()
    for subject in typed_subjects(graph, cls.from_rdf_type):
        decoded = cls.from_rdf(Resource(graph, subject), language_in=language_in)
        if is_successful(decoded):
            result.instances.append(decoded.unwrap())
        else:
            logger.debug("Could not decode %s: %r", subject, decoded.failure())
            result.failures.append(decoded.failure())
    return result
