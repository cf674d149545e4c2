"""GenderType, an enumeration whose only members are schema:Female and schema:Male."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, Type

from rdflib import RDF, URIRef
from rdflib.resource import Resource
from returns.result import Failure, Result, Success

from .json_schemas import GenderTypeJson, ThingJson
from .resource import MistypedValueError, ResourceValueError
from .thing import Enumeration, HasherT
from .types import SCHEMA, hash_string, to_named_node
from .ui_schema import group

GENDER_TYPE_IDENTIFIERS = (SCHEMA.Female, SCHEMA.Male)


@dataclass(frozen=True, kw_only=True, eq=False)
class GenderType(Enumeration):
    type: ClassVar[str] = "GenderType"
    from_rdf_type: ClassVar[URIRef] = SCHEMA.GenderType
    json_model: ClassVar[Type[ThingJson]] = GenderTypeJson

    def _normalize_identifier(self, identifier: Any) -> URIRef:
        identifier = to_named_node(identifier)
        if identifier not in GENDER_TYPE_IDENTIFIERS:
            raise ValueError(f"GenderType identifier must be schema:Female or schema:Male, got {identifier}")
        return identifier

    def hash(self, hasher: HasherT) -> HasherT:
        super().hash(hasher)
        hash_string(hasher, str(self.identifier))
        return hasher

    @classmethod
    def _properties_from_rdf(
        cls,
        resource: Resource,
        *,
        language_in: Sequence[str],
    ) -> Result[dict[str, Any], ResourceValueError]:
        def check_identifier(properties: dict[str, Any]) -> Result[dict[str, Any], ResourceValueError]:
            if properties["identifier"] in GENDER_TYPE_IDENTIFIERS:
                return Success(properties)
            return Failure(MistypedValueError(
                focus_resource=resource,
                predicate=RDF.subject,
                actual_value=properties["identifier"],
                expected_value_type="schema:Female | schema:Male",
            ))

        return super()._properties_from_rdf(resource, language_in=language_in).bind(check_identifier)

    @classmethod
    def json_ui_schema(cls, scope_prefix: str = "#") -> dict[str, Any]:
        return group("GenderType", [Enumeration.json_ui_schema(scope_prefix)])
