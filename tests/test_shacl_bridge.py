"""Tests for the model → SHACL bridge.

Graphs written by ``to_rdf`` conform to the generated shapes; graphs that
break the shape of a class are reported by pySHACL.
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import datetime

import pytest
from rdflib import Graph, Literal, Namespace, RDF, URIRef
from rdflib.collection import Collection
from rdflib.namespace import SH, XSD

from schemamodels.creative_work import ImageObject
from schemamodels.gender_type import GenderType
from schemamodels.occupation import Occupation, Role
from schemamodels.organization import Organization
from schemamodels.person import Person
from schemamodels.quantitative_value import QuantitiveValue
from schemamodels.shacl_bridge import (
    CONCRETE_CLASSES,
    SHAPES,
    class_properties,
    model_shapes,
    shacl_validate,
)
from schemamodels.thing import Thing
from schemamodels.types import SCHEMA

EX = Namespace("http://example.com/")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _staff_graph() -> Graph:
    graph = Graph()
    Person(
        identifier=EX.ann,
        given_name="Ann",
        birth_date=datetime.date(1990, 1, 2),
        gender=SCHEMA.Female,
        has_occupation=[
            Occupation(identifier=EX.engineer, name="Engineer"),
            Role(role_name=EX.lead, start_date=datetime.date(2020, 3, 1)),
        ],
        images=[
            ImageObject(
                identifier=EX["ann.png"],
                encoding_format="image/png",
                height=QuantitiveValue(identifier=EX["ann.png#height"], value=200),
            )
        ],
        member_of=[EX.acme],
    ).to_rdf(graph=graph)
    Organization(identifier=EX.acme, members=[EX.ann]).to_rdf(graph=graph)
    GenderType(identifier=SCHEMA.Female).to_rdf(graph=graph)
    return graph


def _property_shape(shapes: Graph, node_shape, path):
    for prop_shape in shapes.objects(node_shape, SH.property):
        if shapes.value(prop_shape, SH.path) == path:
            return prop_shape
    return None


# ---------------------------------------------------------------------------
# Shape generation tests
# ---------------------------------------------------------------------------

class TestModelShapes:
    def test_node_shape_per_concrete_class(self):
        shapes = model_shapes()
        node_shapes = set(shapes.subjects(RDF.type, SH.NodeShape))
        assert len(node_shapes) == len(CONCRETE_CLASSES) == 7
        assert SHAPES.PersonShape in node_shapes

    def test_target_classes(self):
        shapes = model_shapes()
        assert shapes.value(SHAPES.PersonShape, SH.targetClass) == SCHEMA.Person
        assert shapes.value(SHAPES.QuantitiveValueShape, SH.targetClass) == SCHEMA.QuantitativeValue

    def test_subjects_must_be_iris(self):
        shapes = model_shapes([Person])
        assert shapes.value(SHAPES.PersonShape, SH.nodeKind) == SH.IRI

    def test_inherited_properties(self):
        paths = [spec.path for spec in class_properties(ImageObject)]
        assert paths[:5] == [SCHEMA.description, SCHEMA.identifier, SCHEMA.name, SCHEMA.sameAs, SCHEMA.url]
        assert SCHEMA.isBasedOn in paths
        assert SCHEMA.height in paths

    def test_optional_property_max_count(self):
        shapes = model_shapes([Person])
        given_name = _property_shape(shapes, SHAPES.PersonShape, SCHEMA.givenName)
        assert shapes.value(given_name, SH.maxCount) == Literal(1)
        assert shapes.value(given_name, SH.nodeKind) == SH.Literal
        member_of = _property_shape(shapes, SHAPES.PersonShape, SCHEMA.memberOf)
        assert shapes.value(member_of, SH.maxCount) is None
        assert shapes.value(member_of, SH.nodeKind) == SH.IRI

    def test_date_datatype(self):
        shapes = model_shapes([Role])
        start_date = _property_shape(shapes, SHAPES.RoleShape, SCHEMA.startDate)
        assert shapes.value(start_date, SH.datatype) == XSD.date

    def test_nested_class(self):
        shapes = model_shapes([ImageObject])
        height = _property_shape(shapes, SHAPES.ImageObjectShape, SCHEMA.height)
        assert shapes.value(height, SH["class"]) == SCHEMA.QuantitativeValue

    def test_gender_type_members(self):
        shapes = model_shapes([GenderType])
        members = shapes.value(SHAPES.GenderTypeShape, SH["in"])
        assert list(Collection(shapes, members)) == [SCHEMA.Female, SCHEMA.Male]

    def test_abstract_class_rejected(self):
        with pytest.raises(TypeError):
            model_shapes([Thing])


# ---------------------------------------------------------------------------
# SHACL validation tests
# ---------------------------------------------------------------------------

class TestShaclValidation:
    def test_written_graph_conforms(self):
        result = shacl_validate(_staff_graph())
        assert result.conforms, result.summary()
        assert result.violations == []

    def test_duplicate_optional_value(self):
        graph = _staff_graph()
        graph.add((EX.ann, SCHEMA.givenName, Literal("Annie")))
        result = shacl_validate(graph)
        assert not result.conforms
        assert any(v.path == str(SCHEMA.givenName) for v in result.violations)

    def test_literal_where_iri_expected(self):
        graph = _staff_graph()
        graph.add((EX.ann, SCHEMA.memberOf, Literal("Acme")))
        result = shacl_validate(graph)
        assert not result.conforms
        assert any(v.path == str(SCHEMA.memberOf) for v in result.violations)

    def test_untyped_nested_object(self):
        graph = _staff_graph()
        graph.add((EX["ann.png"], SCHEMA.width, EX.untyped))
        result = shacl_validate(graph)
        assert not result.conforms
        assert any(v.path == str(SCHEMA.width) for v in result.violations)

    def test_unknown_gender_type(self):
        graph = _staff_graph()
        graph.add((EX.other, RDF.type, SCHEMA.GenderType))
        result = shacl_validate(graph)
        assert not result.conforms
        assert any(v.focus_node == str(EX.other) for v in result.violations)

    def test_restricted_to_given_classes(self):
        graph = _staff_graph()
        graph.add((EX.ann, SCHEMA.givenName, Literal("Annie")))
        assert shacl_validate(graph, [Organization]).conforms

    def test_summary_and_turtle(self):
        graph = _staff_graph()
        graph.add((EX.ann, SCHEMA.givenName, Literal("Annie")))
        result = shacl_validate(graph)
        summary = result.summary()
        assert "DOES NOT CONFORM" in summary
        assert "ann.givenName" in summary
        assert "NodeShape" in result.shapes_as_turtle()
        assert "Annie" in result.data_as_turtle()
