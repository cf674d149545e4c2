"""Tests for construction: input normalization, immutability, abstract classes."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import dataclasses
import datetime

import pytest
from rdflib import BNode, Literal, Namespace, URIRef, XSD
from returns.maybe import Nothing, Some

from schemamodels.creative_work import CreativeWork, ImageObject, MediaObject
from schemamodels.gender_type import GenderType
from schemamodels.occupation import Occupation, Role
from schemamodels.organization import Organization
from schemamodels.person import Person
from schemamodels.quantitative_value import QuantitiveValue
from schemamodels.thing import Enumeration, Intangible, StructuredValue, Thing
from schemamodels.types import SCHEMA

EX = Namespace("http://example.com/")


class TestIdentifiers:
    def test_iri_string_becomes_uriref(self):
        person = Person(identifier="http://example.com/ann")
        assert person.identifier == URIRef("http://example.com/ann")
        assert isinstance(person.identifier, URIRef)

    def test_uriref_kept(self):
        identifier = Organization(identifier=EX.acme).identifier
        assert identifier == URIRef("http://example.com/acme")
        assert isinstance(identifier, URIRef)

    def test_identifier_required(self):
        with pytest.raises(TypeError):
            Person()

    def test_wrong_identifier_shape(self):
        with pytest.raises(TypeError):
            Person(identifier=42)

    @pytest.mark.parametrize("properties", [
        {"identifier": ""},
        {"identifier": URIRef("")},
        {"identifier": EX.ann, "url": ""},
        {"identifier": EX.ann, "member_of": [EX.acme, ""]},
        {"identifier": EX.ann, "gender": URIRef("")},
    ])
    def test_empty_iri_rejected(self, properties):
        with pytest.raises(ValueError):
            Person(**properties)

    def test_gender_type_members(self):
        assert GenderType(identifier=SCHEMA.Female).identifier == SCHEMA.Female
        assert GenderType(identifier="http://schema.org/Male").identifier == SCHEMA.Male

    def test_gender_type_rejects_other_iris(self):
        with pytest.raises(ValueError):
            GenderType(identifier=EX.other)


class TestNormalization:
    def test_optional_absent_is_none(self):
        person = Person(identifier=EX.ann)
        assert person.given_name is None
        assert person.birth_date is None
        assert person.gender is None

    def test_maybe_inputs(self):
        person = Person(identifier=EX.ann, given_name=Some("Ann"), family_name=Nothing)
        assert person.given_name == "Ann"
        assert person.family_name is None

    def test_maybe_named_node(self):
        thing = Occupation(identifier=EX.engineer, url=Some("http://example.com/jobs/engineer"))
        assert thing.url == URIRef("http://example.com/jobs/engineer")

    def test_arrays_become_tuples(self):
        person = Person(identifier=EX.ann, identifiers=["a", "b"], same_as=["http://example.com/a"])
        assert person.identifiers == ("a", "b")
        assert person.same_as == (URIRef("http://example.com/a"),)

    def test_array_from_generator(self):
        occupation = Occupation(identifier=EX.x, identifiers=(str(n) for n in range(3)))
        assert occupation.identifiers == ("0", "1", "2")

    def test_none_array_is_empty(self):
        assert Person(identifier=EX.ann, images=None).images == ()

    def test_string_is_not_an_array(self):
        with pytest.raises(TypeError):
            Person(identifier=EX.ann, identifiers="abc")

    def test_datetime_truncated_to_date(self):
        person = Person(identifier=EX.ann, birth_date=datetime.datetime(1990, 1, 2, 15, 30))
        assert person.birth_date == datetime.date(1990, 1, 2)

    def test_wrong_scalar_shape(self):
        with pytest.raises(TypeError):
            Person(identifier=EX.ann, given_name=5)
        with pytest.raises(TypeError):
            QuantitiveValue(identifier=EX.q, value="5")
        with pytest.raises(TypeError):
            QuantitiveValue(identifier=EX.q, value=True)

    def test_nested_object_shape_checked(self):
        with pytest.raises(TypeError):
            ImageObject(identifier=EX.img, height=200)
        with pytest.raises(TypeError):
            Person(identifier=EX.ann, images=[EX.img])
        with pytest.raises(TypeError):
            Person(identifier=EX.ann, has_occupation=[Organization(identifier=EX.acme)])

    def test_nested_maybe(self):
        height = QuantitiveValue(identifier=EX.h, value=10)
        assert ImageObject(identifier=EX.img, height=Some(height)).height is height


class TestGender:
    def test_named_node(self):
        assert Person(identifier=EX.ann, gender=SCHEMA.Female).gender == SCHEMA.Female

    def test_blank_node(self):
        node = BNode()
        assert Person(identifier=EX.ann, gender=node).gender == node

    def test_string_becomes_plain_literal(self):
        gender = Person(identifier=EX.ann, gender="female").gender
        assert gender == Literal("female")

    def test_primitives_become_typed_literals(self):
        assert Person(identifier=EX.ann, gender=True).gender.datatype == XSD.boolean
        assert Person(identifier=EX.ann, gender=3).gender.datatype == XSD.integer
        assert Person(identifier=EX.ann, gender=datetime.date(2000, 1, 1)).gender.datatype == XSD.date

    def test_unsupported_shape(self):
        with pytest.raises(TypeError):
            Person(identifier=EX.ann, gender=object())


class TestImmutability:
    def test_frozen(self):
        person = Person(identifier=EX.ann, given_name="Ann")
        with pytest.raises(dataclasses.FrozenInstanceError):
            person.given_name = "Anne"

    def test_immutable_arrays(self):
        assert isinstance(Person(identifier=EX.ann).images, tuple)

    def test_mutable_arrays(self):
        person = Person(identifier=EX.ann, member_of=(EX.acme,))
        person.member_of.append(EX.club)
        assert person.member_of == [EX.acme, EX.club]

        organization = Organization(identifier=EX.acme)
        organization.members.append(EX.ann)
        organization.sub_organizations.append(EX.lab)
        assert organization.members == [EX.ann]
        assert organization.parent_organizations == []

    def test_default_lists_not_shared(self):
        first = Organization(identifier=EX.a)
        second = Organization(identifier=EX.b)
        first.members.append(EX.ann)
        assert second.members == []


class TestAbstractClasses:
    @pytest.mark.parametrize("cls", [Thing, Intangible, StructuredValue, Enumeration, CreativeWork, MediaObject])
    def test_cannot_instantiate(self, cls):
        with pytest.raises(TypeError):
            cls(identifier=EX.x)

    @pytest.mark.parametrize("cls, expected", [
        (GenderType, "GenderType"),
        (ImageObject, "ImageObject"),
        (Occupation, "Occupation"),
        (Organization, "Organization"),
        (Person, "Person"),
        (QuantitiveValue, "QuantitiveValue"),
        (Role, "Role"),
    ])
    def test_type_discriminant(self, cls, expected):
        assert cls.type == expected

    def test_from_rdf_types(self):
        assert QuantitiveValue.from_rdf_type == SCHEMA.QuantitativeValue
        assert Person.from_rdf_type == SCHEMA.Person
        assert Thing.from_rdf_type is None
