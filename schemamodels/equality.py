"""Structural equality — comparisons that explain *why* two values differ.

Every model's ``equals`` returns an ``EqualsResult``: ``Success(True)`` when
the objects are equal, otherwise a ``Failure`` carrying an ``Unequal``
descriptor. Descriptors nest: a mismatching property wraps the mismatch of its
values, an array mismatch lists why no right element matched, and so on.

Comparison short-circuits on the first mismatching property, in the order the
properties are declared (supertype properties first).
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success


# ---------------------------------------------------------------------------
# Unequal descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BooleanEqualsUnequal:
    """Two values compared unequal by ``==`` (or a boolean ``equals``)."""
    left: Any
    right: Any

    def __repr__(self) -> str:
        return f"BooleanEquals({self.left!r} != {self.right!r})"


@dataclass(frozen=True)
class LeftNullUnequal:
    """The left value is absent, the right one is present."""
    right: Any

    def __repr__(self) -> str:
        return f"LeftNull(right={self.right!r})"


@dataclass(frozen=True)
class RightNullUnequal:
    """The left value is present, the right one is absent."""
    left: Any

    def __repr__(self) -> str:
        return f"RightNull(left={self.left!r})"


@dataclass(frozen=True)
class ArrayLengthUnequal:
    left: Sequence[Any]
    right: Sequence[Any]

    def __repr__(self) -> str:
        return f"ArrayLength({len(self.left)} != {len(self.right)})"


@dataclass(frozen=True)
class ArrayElementUnequal:
    """A left element matched none of the right elements.

    ``unequals`` holds, for each right element, why it did not match.
    """
    left_array: Sequence[Any]
    element: Any
    element_index: int
    right_array: Sequence[Any]
    unequals: tuple[Unequal, ...]

    def __repr__(self) -> str:
        return f"ArrayElement(index={self.element_index}, element={self.element!r})"


@dataclass(frozen=True)
class PropertyUnequal:
    """Two objects differ in the named property."""
    left: Any
    right: Any
    property_name: str
    property_values_unequal: Unequal

    def __repr__(self) -> str:
        return f"Property({self.property_name}: {self.property_values_unequal!r})"


Unequal = Union[
    ArrayElementUnequal,
    ArrayLengthUnequal,
    BooleanEqualsUnequal,
    LeftNullUnequal,
    PropertyUnequal,
    RightNullUnequal,
]

EqualsResult = Result[bool, Unequal]
EQUAL: EqualsResult = Success(True)

Comparator = Callable[[Any, Any], EqualsResult]


# ---------------------------------------------------------------------------
# Comparators
# ---------------------------------------------------------------------------

def from_boolean_equals_result(left: Any, right: Any, result: bool | EqualsResult) -> EqualsResult:
    if not isinstance(result, bool):
        return result
    if result:
        return EQUAL
    return Failure(BooleanEqualsUnequal(left=left, right=right))


def strict_equals(left: Any, right: Any) -> EqualsResult:
    """Equality by ``==``.

    Serves primitives (strings, numbers, discriminants) and RDF terms alike,
    since rdflib terms define ``==`` on term type and value.
    """
    return from_boolean_equals_result(left, right, left == right)


boolean_equals = strict_equals


def date_equals(left: datetime.date, right: datetime.date) -> EqualsResult:
    return from_boolean_equals_result(left, right, left.isoformat() == right.isoformat())


def object_equals(left: Any, right: Any) -> EqualsResult:
    """Delegate to the left object's own ``equals``."""
    return left.equals(right)


def union_equals(left: Any, right: Any) -> EqualsResult:
    """Compare members of a tagged union: same ``type`` first, then ``equals``."""
    if left.type == right.type:
        return left.equals(right)
    return Failure(
        PropertyUnequal(
            left=left,
            right=right,
            property_name="type",
            property_values_unequal=BooleanEqualsUnequal(left=left.type, right=right.type),
        )
    )


def maybe_equals(value_equals: Comparator) -> Comparator:
    """Lift a comparator over optional values (None = absent)."""
    def compare(left: Any, right: Any) -> EqualsResult:
        if left is not None:
            if right is not None:
                return from_boolean_equals_result(left, right, value_equals(left, right))
            return Failure(RightNullUnequal(left=left))
        if right is not None:
            return Failure(LeftNullUnequal(right=right))
        return EQUAL

    return compare


def array_equals(element_equals: Comparator) -> Comparator:
    """Lift a comparator over arrays.

    Arrays are equal when they have the same length and every left element
    equals at least one right element.
    """
    def compare(left_array: Sequence[Any], right_array: Sequence[Any]) -> EqualsResult:
        if len(left_array) != len(right_array):
            return Failure(ArrayLengthUnequal(left=left_array, right=right_array))

        for element_index, left_element in enumerate(left_array):
            right_unequals: list[Unequal] = []
            for right_element in right_array:
                result = from_boolean_equals_result(
                    left_element, right_element, element_equals(left_element, right_element)
                )
                if is_successful(result):
                    break
                right_unequals.append(result.failure())

            if len(right_unequals) == len(right_array):
                return Failure(
                    ArrayElementUnequal(
                        left_array=left_array,
                        element=left_element,
                        element_index=element_index,
                        right_array=right_array,
                        unequals=tuple(right_unequals),
                    )
                )

        return EQUAL

    return compare


def property_key(attribute: str) -> str:
    """Vocabulary name of a Python attribute: ``same_as`` -> ``sameAs``."""
    head, *rest = attribute.split("_")
    return head + "".join(part.capitalize() for part in rest)


def compare_properties(
    left: Any,
    right: Any,
    comparisons: Sequence[tuple[str, Comparator]],
) -> EqualsResult:
    """Compare the named attributes of two objects, stopping at the first mismatch.

    Mismatches are reported under the property's vocabulary name, so
    ``has_occupation`` surfaces as ``hasOccupation``.
    """
    for attribute, compare in comparisons:
        result = compare(getattr(left, attribute), getattr(right, attribute))
        if not is_successful(result):
            return Failure(
                PropertyUnequal(
                    left=left,
                    right=right,
                    property_name=property_key(attribute),
                    property_values_unequal=result.failure(),
                )
            )
    return EQUAL
