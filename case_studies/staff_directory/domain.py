"""Staff Directory — model definitions.

A small company directory built from the schema.org model:
- Organizations: the company, its parent holding and a research lab
- People: staff with occupations, dated roles, portraits and memberships

The directory exercises every concrete class:
- Occupation and Role side by side in ``has_occupation``
- ImageObject with nested QuantitiveValue dimensions
- GenderType members and literal genders
- Mutable membership arrays kept in sync across organizations and people
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

import datetime

from rdflib import Literal, Namespace

from schemamodels.creative_work import ImageObject
from schemamodels.gender_type import GenderType
from schemamodels.occupation import Occupation, Role
from schemamodels.organization import Organization
from schemamodels.person import Person
from schemamodels.quantitative_value import QuantitiveValue
from schemamodels.types import SCHEMA

ACME = Namespace("http://acme.example.org/")


def build_organizations() -> list[Organization]:
    """The company, its parent holding and a research lab."""
    holding = Organization(
        identifier=ACME.holding,
        name="Acme Holding",
        sub_organizations=[ACME.company],
    )
    company = Organization(
        identifier=ACME.company,
        name="Acme Corporation",
        url="http://acme.example.org/",
        parent_organizations=[ACME.holding],
        sub_organizations=[ACME.lab],
    )
    lab = Organization(
        identifier=ACME.lab,
        name="Acme Research Lab",
        parent_organizations=[ACME.company],
    )
    return [holding, company, lab]


def portrait(slug: str, width: int, height: int) -> ImageObject:
    return ImageObject(
        identifier=ACME[f"images/{slug}.jpg"],
        content_url=ACME[f"files/{slug}.jpg"],
        encoding_format="image/jpeg",
        width=QuantitiveValue(identifier=ACME[f"images/{slug}.jpg#width"], value=width),
        height=QuantitiveValue(identifier=ACME[f"images/{slug}.jpg#height"], value=height),
    )


def build_people() -> list[Person]:
    """Staff members of the company and the lab."""
    engineer = Occupation(identifier=ACME["occupations/engineer"], name="Software Engineer")
    researcher = Occupation(identifier=ACME["occupations/researcher"], name="Researcher")

    ann = Person(
        identifier=ACME["people/ann"],
        identifiers=["E-1001"],
        name="Ann Smith",
        given_name="Ann",
        family_name="Smith",
        birth_date=datetime.date(1988, 4, 12),
        gender=SCHEMA.Female,
        has_occupation=[
            engineer,
            Role(role_name=ACME["roles/team-lead"], start_date=datetime.date(2021, 1, 1)),
        ],
        images=[portrait("ann", 400, 600)],
        member_of=[ACME.company],
    )
    bob = Person(
        identifier=ACME["people/bob"],
        identifiers=["E-1002"],
        name="Bob Jones",
        given_name="Bob",
        family_name="Jones",
        gender=SCHEMA.Male,
        has_occupation=[
            researcher,
            Role(
                role_name=ACME["roles/intern"],
                start_date=datetime.date(2019, 6, 1),
                end_date=datetime.date(2019, 9, 1),
            ),
        ],
        member_of=[ACME.lab],
    )
    kim = Person(
        identifier=ACME["people/kim"],
        identifiers=["E-1003"],
        name="Kim Lee",
        given_name="Kim",
        gender=Literal("non-binary", lang="en"),
        has_occupation=[engineer],
        images=[portrait("kim", 300, 300)],
        member_of=[ACME.company, ACME.lab],
    )
    return [ann, bob, kim]


def build_gender_types() -> list[GenderType]:
    return [
        GenderType(identifier=SCHEMA.Female, name="Female"),
        GenderType(identifier=SCHEMA.Male, name="Male"),
    ]


def link_members(organizations: list[Organization], people: list[Person]) -> None:
    """Record each person on the ``members`` list of the organizations they belong to."""
    by_identifier = {organization.identifier: organization for organization in organizations}
    for person in people:
        for identifier in person.member_of:
            organization = by_identifier.get(identifier)
            if organization is not None and person.identifier not in organization.members:
                organization.members.append(person.identifier)


def build_directory() -> tuple[list[Organization], list[Person]]:
    organizations = build_organizations()
    people = build_people()
    link_members(organizations, people)
    return organizations, people
