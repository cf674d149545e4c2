"""schemamodels — a schema.org object model with JSON and RDF representations.

Each model class is an immutable dataclass that converts to and from three
representations:

- Python objects: keyword-only construction with input normalization
- JSON: ``to_json()`` / ``from_json()`` validated by pydantic models
  (``schemamodels.json_schemas``), exportable as JSON Schema and a
  JSON Forms UI schema
- RDF: ``to_rdf(graph=...)`` / ``from_rdf(resource)`` over rdflib graphs

Class hierarchy:

  Thing (schemamodels.thing)
    Intangible
      StructuredValue  -> QuantitiveValue (schemamodels.quantitative_value)
      Enumeration      -> GenderType      (schemamodels.gender_type)
      Occupation, Role                    (schemamodels.occupation)
    CreativeWork -> MediaObject -> ImageObject (schemamodels.creative_work)
    Organization                          (schemamodels.organization)
    Person                                (schemamodels.person)

Conversions from external data return ``returns.result.Result``: ``Success``
with the instance, or ``Failure`` with a ``pydantic.ValidationError`` (JSON)
or ``schemamodels.resource.ResourceValueError`` (RDF). ``equals`` returns a
``Result`` as well, whose failure describes the first mismatching property.

The SHACL bridge (schemamodels.shacl_bridge) states the RDF shape of the
concrete classes as SHACL shapes and validates graphs with pySHACL.
``schemamodels.graph.instances_from_graph`` decodes every instance of a class
found in a graph. Defaults such as the prefix of synthesized identifiers come
from ``schemamodels.config`` (environment variables prefixed ``SCHEMAMODELS_``).
"""
