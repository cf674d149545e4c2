"""
Pydantic schemas for the JSON shape of every model class.
Used to validate ``from_json`` input and to export JSON Schema.

Each class's schema extends its supertype's, narrows the ``type``
discriminant, and adds the class's own keys.
"""

import datetime
import re
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictFloat, StrictInt


class JsonModel(BaseModel):
    """Base for all JSON shapes: keys are the wire names, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ===================
# Scalars (no coercion: "5" is not a number, 0 is not a date)
# ===================

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def date_from_string(value: Any) -> datetime.date:
    """Accept only ``YYYY-MM-DD`` strings, the form ``to_json`` writes."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise ValueError("expected a YYYY-MM-DD date string")
    return datetime.date.fromisoformat(value)


JsonDate = Annotated[datetime.date, BeforeValidator(date_from_string)]
JsonNumber = Union[StrictInt, StrictFloat]


# ===================
# Terms
# ===================

class IdentifierJson(JsonModel):
    """Reference form of a named node: ``{"@id": iri}``."""

    id: str = Field(..., alias="@id", min_length=1)


class NamedNodeTermJson(JsonModel):
    id: str = Field(..., alias="@id", min_length=1)
    term_type: Literal["NamedNode"] = Field(..., alias="termType")


class BlankNodeTermJson(JsonModel):
    id: str = Field(..., alias="@id", min_length=1, description="Blank node label prefixed with _:")
    term_type: Literal["BlankNode"] = Field(..., alias="termType")


class LiteralTermJson(JsonModel):
    value: str = Field(..., alias="@value")
    language: Optional[str] = Field(default=None, alias="@language")
    datatype: Optional[str] = Field(default=None, alias="@type")
    term_type: Literal["Literal"] = Field(..., alias="termType")


TermJson = Annotated[
    Union[BlankNodeTermJson, NamedNodeTermJson, LiteralTermJson],
    Field(discriminator="term_type"),
]


# ===================
# Thing and abstract supertypes
# ===================

class ThingJson(JsonModel):
    """JSON shape shared by every schema.org Thing."""

    description: Optional[str] = None
    id: str = Field(..., alias="@id", min_length=1)
    identifiers: list[str]
    name: Optional[str] = None
    same_as: list[IdentifierJson] = Field(..., alias="sameAs")
    type: Literal[
        "GenderType",
        "ImageObject",
        "Occupation",
        "Organization",
        "Person",
        "QuantitiveValue",
        "Role",
    ]
    url: Optional[IdentifierJson] = None


class IntangibleJson(ThingJson):
    type: Literal["GenderType", "Occupation", "QuantitiveValue", "Role"]


class StructuredValueJson(IntangibleJson):
    type: Literal["QuantitiveValue"]


class EnumerationJson(IntangibleJson):
    type: Literal["GenderType"]


class CreativeWorkJson(ThingJson):
    is_based_on: list[IdentifierJson] = Field(..., alias="isBasedOn")
    type: Literal["ImageObject"]


# ===================
# Concrete classes
# ===================

class QuantitiveValueJson(StructuredValueJson):
    type: Literal["QuantitiveValue"]
    value: Optional[JsonNumber] = None


class MediaObjectJson(CreativeWorkJson):
    content_url: Optional[IdentifierJson] = Field(default=None, alias="contentUrl")
    encoding_format: Optional[str] = Field(default=None, alias="encodingFormat")
    height: Optional[QuantitiveValueJson] = None
    type: Literal["ImageObject"]
    width: Optional[QuantitiveValueJson] = None


class ImageObjectJson(MediaObjectJson):
    type: Literal["ImageObject"]


class GenderTypeJson(EnumerationJson):
    id: Literal["http://schema.org/Female", "http://schema.org/Male"] = Field(..., alias="@id")
    type: Literal["GenderType"]


class OccupationJson(IntangibleJson):
    type: Literal["Occupation"]


class RoleJson(IntangibleJson):
    end_date: Optional[JsonDate] = Field(default=None, alias="endDate")
    role_name: Optional[IdentifierJson] = Field(default=None, alias="roleName")
    start_date: Optional[JsonDate] = Field(default=None, alias="startDate")
    type: Literal["Role"]


OccupationOrRoleJson = Annotated[
    Union[OccupationJson, RoleJson],
    Field(discriminator="type"),
]


class OrganizationJson(ThingJson):
    members: list[IdentifierJson]
    parent_organizations: list[IdentifierJson] = Field(..., alias="parentOrganizations")
    sub_organizations: list[IdentifierJson] = Field(..., alias="subOrganizations")
    type: Literal["Organization"]


class PersonJson(ThingJson):
    birth_date: Optional[JsonDate] = Field(default=None, alias="birthDate")
    family_name: Optional[str] = Field(default=None, alias="familyName")
    gender: Optional[TermJson] = None
    given_name: Optional[str] = Field(default=None, alias="givenName")
    has_occupation: list[OccupationOrRoleJson] = Field(..., alias="hasOccupation")
    images: list[ImageObjectJson]
    member_of: list[IdentifierJson] = Field(..., alias="memberOf")
    type: Literal["Person"]
