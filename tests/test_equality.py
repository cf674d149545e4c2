"""Tests for structural equality: comparators and model ``equals``."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import datetime

import pytest
from rdflib import Literal, Namespace
from returns.pipeline import is_successful

from schemamodels.equality import (
    ArrayElementUnequal,
    ArrayLengthUnequal,
    BooleanEqualsUnequal,
    LeftNullUnequal,
    PropertyUnequal,
    RightNullUnequal,
    array_equals,
    boolean_equals,
    compare_properties,
    date_equals,
    maybe_equals,
    property_key,
    strict_equals,
    union_equals,
)
from schemamodels.creative_work import ImageObject
from schemamodels.occupation import Occupation, Role
from schemamodels.organization import Organization
from schemamodels.person import Person
from schemamodels.quantitative_value import QuantitiveValue

EX = Namespace("http://example.com/")


def _person(**overrides) -> Person:
    properties = dict(
        identifier=EX.ann,
        given_name="Ann",
        family_name="Smith",
        birth_date=datetime.date(1990, 1, 2),
        has_occupation=[Occupation(identifier=EX.engineer), Role(role_name=EX.lead)],
        images=[ImageObject(identifier=EX["ann.png"], height=QuantitiveValue(identifier=EX.h, value=200))],
        member_of=[EX.acme, EX.club],
    )
    properties.update(overrides)
    return Person(**properties)


# ---------------------------------------------------------------------------
# Comparators
# ---------------------------------------------------------------------------

class TestComparators:
    def test_strict_equals(self):
        assert is_successful(strict_equals("a", "a"))
        unequal = strict_equals("a", "b").failure()
        assert unequal == BooleanEqualsUnequal(left="a", right="b")

    def test_date_equals(self):
        assert is_successful(date_equals(datetime.date(2020, 1, 1), datetime.date(2020, 1, 1)))
        assert not is_successful(date_equals(datetime.date(2020, 1, 1), datetime.date(2020, 1, 2)))

    def test_maybe_equals_both_absent(self):
        assert is_successful(maybe_equals(strict_equals)(None, None))

    def test_maybe_equals_right_absent(self):
        assert maybe_equals(strict_equals)("a", None).failure() == RightNullUnequal(left="a")

    def test_maybe_equals_left_absent(self):
        assert maybe_equals(strict_equals)(None, "b").failure() == LeftNullUnequal(right="b")

    def test_array_equals_ignores_order(self):
        assert is_successful(array_equals(strict_equals)(("a", "b"), ("b", "a")))

    def test_array_length_mismatch(self):
        unequal = array_equals(strict_equals)(("a",), ("a", "b")).failure()
        assert isinstance(unequal, ArrayLengthUnequal)

    def test_array_element_mismatch(self):
        unequal = array_equals(strict_equals)(("a", "c"), ("a", "b")).failure()
        assert isinstance(unequal, ArrayElementUnequal)
        assert unequal.element == "c"
        assert unequal.element_index == 1
        assert len(unequal.unequals) == 2

    def test_rdf_terms_compare_by_value(self):
        compare = maybe_equals(strict_equals)
        assert is_successful(compare(Literal("x", lang="en"), Literal("x", lang="en")))
        assert not is_successful(compare(Literal("x", lang="en"), Literal("x", lang="de")))

    def test_compare_properties_names_first_mismatch(self):
        class Point:
            def __init__(self, x, y):
                self.x, self.y = x, y

        unequal = compare_properties(
            Point(1, 2), Point(1, 3), [("x", strict_equals), ("y", strict_equals)]
        ).failure()
        assert isinstance(unequal, PropertyUnequal)
        assert unequal.property_name == "y"
        assert unequal.property_values_unequal == BooleanEqualsUnequal(left=2, right=3)

    @pytest.mark.parametrize("attribute, key", [
        ("name", "name"),
        ("same_as", "sameAs"),
        ("has_occupation", "hasOccupation"),
        ("parent_organizations", "parentOrganizations"),
    ])
    def test_property_key(self, attribute, key):
        assert property_key(attribute) == key

    def test_boolean_equals_compares_terms(self):
        assert boolean_equals is strict_equals
        assert is_successful(boolean_equals(EX.a, EX.a))
        assert boolean_equals(EX.a, Literal(str(EX.a))).failure() == BooleanEqualsUnequal(
            left=EX.a, right=Literal(str(EX.a))
        )

    def test_union_equals_checks_type_first(self):
        unequal = union_equals(Occupation(identifier=EX.x), Role(identifier=EX.x)).failure()
        assert isinstance(unequal, PropertyUnequal)
        assert unequal.property_name == "type"


# ---------------------------------------------------------------------------
# Model equals
# ---------------------------------------------------------------------------

class TestModelEquals:
    def test_reflexive(self):
        person = _person()
        assert is_successful(person.equals(person))

    def test_structurally_equal_instances(self):
        assert is_successful(_person().equals(_person()))

    def test_supertype_property_mismatch(self):
        unequal = _person().equals(_person(identifier=EX.bob)).failure()
        assert unequal.property_name == "identifier"

    def test_own_property_mismatch(self):
        unequal = _person().equals(_person(given_name="Anne")).failure()
        assert unequal.property_name == "givenName"

    def test_first_mismatch_wins(self):
        unequal = _person().equals(_person(birth_date=None, given_name="Anne")).failure()
        assert unequal.property_name == "birthDate"
        assert isinstance(unequal.property_values_unequal, RightNullUnequal)

    def test_nested_object_mismatch(self):
        other = _person(images=[
            ImageObject(identifier=EX["ann.png"], height=QuantitiveValue(identifier=EX.h, value=300))
        ])
        unequal = _person().equals(other).failure()
        assert unequal.property_name == "images"
        element_unequal = unequal.property_values_unequal
        assert isinstance(element_unequal, ArrayElementUnequal)
        nested = element_unequal.unequals[0]
        assert nested.property_name == "height"
        assert nested.property_values_unequal.property_name == "value"

    def test_polymorphic_array_mismatch(self):
        other = _person(has_occupation=[Occupation(identifier=EX.engineer), Role(role_name=EX.intern)])
        unequal = _person().equals(other).failure()
        assert unequal.property_name == "hasOccupation"

    def test_mismatches_use_vocabulary_names(self):
        unequal = _person().equals(_person(same_as=[EX.elsewhere])).failure()
        assert unequal.property_name == "sameAs"
        unequal = _person().equals(_person(member_of=[EX.acme])).failure()
        assert unequal.property_name == "memberOf"

    def test_mutable_array_order_is_irrelevant(self):
        assert is_successful(_person().equals(_person(member_of=[EX.club, EX.acme])))

    def test_organization_members(self):
        left = Organization(identifier=EX.acme, members=[EX.ann])
        right = Organization(identifier=EX.acme, members=[EX.ann])
        assert is_successful(left.equals(right))
        right.members.append(EX.bob)
        assert left.equals(right).failure().property_name == "members"
