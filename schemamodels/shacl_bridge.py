"""SHACL Bridge — describes the model classes as SHACL shapes.

``to_rdf`` and ``from_rdf`` define the RDF shape of every model class
implicitly. This bridge states the same shape explicitly so that graphs can be
checked with pySHACL before (or instead of) decoding them:

  1. Each concrete class → sh:NodeShape targeting its rdf:type, sh:nodeKind sh:IRI
  2. Each property      → property shape on its schema.org predicate
       named node       → sh:nodeKind sh:IRI
       string / number  → sh:nodeKind sh:Literal
       date             → sh:datatype xsd:date
       nested object    → sh:class of the nested class
       optional         → sh:maxCount 1
  3. GenderType         → sh:in ( schema:Female schema:Male ) on the node itself

Properties are inherited: a class's shape carries the property shapes of every
class in its MRO.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Type

from pyshacl import validate as pyshacl_validate
from rdflib import BNode, Graph, Literal, Namespace, RDF, RDFS, URIRef, XSD
from rdflib.collection import Collection
from rdflib.namespace import SH

from .creative_work import CreativeWork, ImageObject, MediaObject
from .gender_type import GENDER_TYPE_IDENTIFIERS, GenderType
from .occupation import Occupation, Role
from .organization import Organization
from .person import Person
from .quantitative_value import QuantitiveValue
from .thing import Thing
from .types import SCHEMA


SHAPES = Namespace("urn:schemamodels:shapes:")

CONCRETE_CLASSES: tuple[Type[Thing], ...] = (
    GenderType,
    ImageObject,
    Occupation,
    Organization,
    Person,
    QuantitiveValue,
    Role,
)


# ---------------------------------------------------------------------------
# Property descriptions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PropertySpec:
    """How one property appears in RDF."""
    path: URIRef
    node_kind: URIRef | None = None
    datatype: URIRef | None = None
    class_: URIRef | None = None
    optional: bool = False


def _iri(path: URIRef, optional: bool = False) -> PropertySpec:
    return PropertySpec(path, node_kind=SH.IRI, optional=optional)


def _literal(path: URIRef, optional: bool = False) -> PropertySpec:
    return PropertySpec(path, node_kind=SH.Literal, optional=optional)


def _date(path: URIRef) -> PropertySpec:
    return PropertySpec(path, datatype=XSD.date, optional=True)


_OWN_PROPERTIES: dict[type, tuple[PropertySpec, ...]] = {
    Thing: (
        _literal(SCHEMA.description, optional=True),
        _literal(SCHEMA.identifier),
        _literal(SCHEMA.name, optional=True),
        _iri(SCHEMA.sameAs),
        _iri(SCHEMA.url, optional=True),
    ),
    CreativeWork: (
        _iri(SCHEMA.isBasedOn),
    ),
    MediaObject: (
        _iri(SCHEMA.contentUrl, optional=True),
        _literal(SCHEMA.encodingFormat, optional=True),
        PropertySpec(SCHEMA.height, class_=QuantitiveValue.from_rdf_type, optional=True),
        PropertySpec(SCHEMA.width, class_=QuantitiveValue.from_rdf_type, optional=True),
    ),
    QuantitiveValue: (
        _literal(SCHEMA.value, optional=True),
    ),
    Role: (
        _date(SCHEMA.endDate),
        _iri(SCHEMA.roleName, optional=True),
        _date(SCHEMA.startDate),
    ),
    Person: (
        _date(SCHEMA.birthDate),
        _literal(SCHEMA.familyName, optional=True),
        PropertySpec(SCHEMA.gender, optional=True),
        _literal(SCHEMA.givenName, optional=True),
        _iri(SCHEMA.hasOccupation),
        PropertySpec(SCHEMA.image, class_=ImageObject.from_rdf_type),
        _iri(SCHEMA.memberOf),
    ),
    Organization: (
        _iri(SCHEMA.member),
        _iri(SCHEMA.parentOrganization),
        _iri(SCHEMA.subOrganization),
    ),
}


def class_properties(cls: Type[Thing]) -> list[PropertySpec]:
    """Property specs of ``cls`` and its supertypes, supertypes first."""
    specs: list[PropertySpec] = []
    for klass in reversed(cls.__mro__):
        specs.extend(_OWN_PROPERTIES.get(klass, ()))
    return specs


# ---------------------------------------------------------------------------
# Model classes → SHACL Shapes
# ---------------------------------------------------------------------------

def model_shapes(classes: Iterable[Type[Thing]] = CONCRETE_CLASSES) -> Graph:
    """Build a SHACL shapes graph with one sh:NodeShape per concrete class."""
    sg = Graph()
    sg.bind("sh", SH)
    sg.bind("schema", SCHEMA)
    sg.bind("xsd", XSD)

    for cls in classes:
        if cls.from_rdf_type is None:
            raise TypeError(f"{cls.__name__} is abstract and has no shape")

        shape_uri = SHAPES[f"{cls.__name__}Shape"]
        sg.add((shape_uri, RDF.type, SH.NodeShape))
        sg.add((shape_uri, SH.targetClass, cls.from_rdf_type))
        sg.add((shape_uri, SH.nodeKind, SH.IRI))
        sg.add((shape_uri, RDFS.label, Literal(f"Shape for {cls.__name__}")))

        if cls is GenderType:
            members = BNode()
            Collection(sg, members, list(GENDER_TYPE_IDENTIFIERS))
            sg.add((shape_uri, SH["in"], members))

        for spec in class_properties(cls):
            prop_shape = BNode()
            sg.add((shape_uri, SH.property, prop_shape))
            sg.add((prop_shape, SH.path, spec.path))
            if spec.node_kind is not None:
                sg.add((prop_shape, SH.nodeKind, spec.node_kind))
            if spec.datatype is not None:
                sg.add((prop_shape, SH.datatype, spec.datatype))
            if spec.class_ is not None:
                sg.add((prop_shape, SH["class"], spec.class_))
            if spec.optional:
                sg.add((prop_shape, SH.maxCount, Literal(1)))

    return sg


# ---------------------------------------------------------------------------
# SHACL Validation
# ---------------------------------------------------------------------------

def shacl_validate(
    data_graph: Graph,
    classes: Iterable[Type[Thing]] = CONCRETE_CLASSES,
) -> SHACLValidationResult:
    """Validate ``data_graph`` against the shapes of ``classes`` with pySHACL."""
    shapes_graph = model_shapes(classes)

    conforms, results_graph, results_text = pyshacl_validate(
        data_graph,
        shacl_graph=shapes_graph,
        inference="none",
        abort_on_first=False,
    )

    violations = []
    for result in results_graph.subjects(RDF.type, SH.ValidationResult):
        focus = results_graph.value(result, SH.focusNode)
        path = results_graph.value(result, SH.resultPath)
        message = results_graph.value(result, SH.resultMessage)
        severity = results_graph.value(result, SH.resultSeverity)

        violations.append(SHACLViolation(
            focus_node=str(focus) if focus else "",
            path=str(path) if path else "",
            message=str(message) if message else "",
            severity=str(severity) if severity else "",
        ))

    return SHACLValidationResult(
        conforms=conforms,
        violations=violations,
        results_text=results_text,
        shapes_graph=shapes_graph,
        data_graph=data_graph,
    )


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

def _local_name(iri: str) -> str:
    return iri.rsplit("/", 1)[-1] if "/" in iri else iri


@dataclass
class SHACLViolation:
    """A single SHACL validation violation."""
    focus_node: str
    path: str
    message: str
    severity: str

    def __repr__(self) -> str:
        return f"SHACLViolation({_local_name(self.focus_node)}.{_local_name(self.path)}: {self.message})"


@dataclass
class SHACLValidationResult:
    conforms: bool
    violations: list[SHACLViolation] = field(default_factory=list)
    results_text: str = ""
    shapes_graph: Graph | None = None
    data_graph: Graph | None = None

    def summary(self) -> str:
        status = "CONFORMS" if self.conforms else "DOES NOT CONFORM"
        lines = [f"SHACL Validation: {status}", "-" * 50]
        if self.violations:
            lines.append(f"  Violations ({len(self.violations)}):")
            for v in self.violations:
                lines.append(f"    - {_local_name(v.focus_node)}.{_local_name(v.path)}: {v.message}")
        else:
            lines.append("  No violations found.")
        return "\n".join(lines)

    def shapes_as_turtle(self) -> str:
        if self.shapes_graph is None:
            return ""
        return self.shapes_graph.serialize(format="turtle")

    def data_as_turtle(self) -> str:
        """Serialize the validated data graph as Turtle for inspection."""
        if self.data_graph is None:
            return ""
        return self.data_graph.serialize(format="turtle")
