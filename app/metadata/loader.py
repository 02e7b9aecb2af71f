"""Load CRM entity metadata documents into entity descriptors.

Documents follow the shape returned by the CRM metadata service
(``EntityDefinitions`` with expanded ``Attributes``), either as a bare list,
an OData ``{"value": [...]}`` envelope, or ``{"entities": [...]}``. JSON and
YAML files are accepted.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from pydantic import TypeAdapter, ValidationError

from app.generators.xrm_gen.types import (
    AttributeDescriptor,
    AttributeTypeCode,
    EntityDescriptor,
)

log = logging.getLogger(__name__)


class MetadataError(ValueError):
    """Raised when a metadata document cannot be turned into descriptors."""


def _get(data: Dict[str, Any], *keys: str, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _parse_type_code(raw):
    # AttributeType comes either as a plain string or as {"Value": "..."}
    if isinstance(raw, dict):
        raw = raw.get("Value")
    return AttributeTypeCode.parse(raw)


_BOOL = TypeAdapter(bool)


def _parse_bool(raw, field: str) -> bool:
    if isinstance(raw, dict):
        raw = raw.get("Value")
    try:
        return _BOOL.validate_python(raw)
    except ValidationError as e:
        raise MetadataError(f"{field}: expected a boolean, got {raw!r}") from e


def parse_attribute(data: Dict[str, Any], entity_name: str = "") -> AttributeDescriptor:
    logical_name = _get(data, "LogicalName", "logical_name")
    if not logical_name:
        raise MetadataError(f"Attribute without LogicalName on entity '{entity_name}'")
    return AttributeDescriptor(
        logical_name=logical_name,
        attribute_type=_parse_type_code(_get(data, "AttributeType", "attribute_type")),
        is_primary_id=_parse_bool(
            _get(data, "IsPrimaryId", "is_primary_id", default=False),
            f"{entity_name}.{logical_name} IsPrimaryId",
        ),
    )


def parse_entity(data: Dict[str, Any]) -> EntityDescriptor:
    """Build an EntityDescriptor from one entity definition."""
    logical_name = _get(data, "LogicalName", "logical_name")
    if not logical_name:
        raise MetadataError("Entity definition without LogicalName")

    attributes = tuple(
        parse_attribute(attr, logical_name)
        for attr in _get(data, "Attributes", "attributes", default=[])
    )

    primary_id = _get(data, "PrimaryIdAttribute", "primary_id_attribute")
    if not primary_id:
        primary_id = next(
            (a.logical_name for a in attributes if a.is_primary_id),
            f"{logical_name}id",
        )
    entity = EntityDescriptor(
        logical_name=logical_name,
        schema_name=_get(data, "SchemaName", "schema_name", default=""),
        primary_id_attribute=primary_id,
        attributes=attributes,
        collection_name=_get(data, "LogicalCollectionName", "collection_name"),
    )
    check_primary_id(entity)
    return entity


def check_primary_id(entity: EntityDescriptor) -> None:
    """Require the primary id to be one of the attributes, when any were retrieved."""
    names = {a.logical_name for a in entity.attributes}
    if names and entity.primary_id_attribute not in names:
        raise MetadataError(
            f"Primary id attribute '{entity.primary_id_attribute}' "
            f"is not an attribute of '{entity.logical_name}'"
        )


def parse_document(document: Any) -> List[EntityDescriptor]:
    """Parse a loaded metadata document into entity descriptors."""
    if isinstance(document, dict):
        if "value" in document:
            document = document["value"]
        elif "entities" in document:
            document = document["entities"]
        else:
            document = [document]
    if not isinstance(document, list):
        raise MetadataError("Metadata document must be a list of entity definitions")
    return [parse_entity(entry) for entry in document]


def load_entities(path: Path) -> List[EntityDescriptor]:
    """Read a JSON or YAML metadata file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MetadataError(f"Cannot read metadata file {path}: {e}") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise MetadataError(f"Cannot parse metadata file {path}: {e}") from e

    entities = parse_document(document)
    log.info("Loaded %d entity definitions from %s", len(entities), path)
    return entities


def select_entities(
    entities: List[EntityDescriptor],
    names: Optional[Iterable[str]] = None,
) -> List[EntityDescriptor]:
    """Pick entities by logical name, in the order the names are given.

    Repeated names select the entity repeatedly. No names selects everything.
    """
    names = list(names or [])
    if not names:
        return list(entities)

    by_name = {entity.logical_name: entity for entity in entities}
    missing = [name for name in names if name not in by_name]
    if missing:
        raise MetadataError(f"Unknown entities selected: {', '.join(missing)}")
    return [by_name[name] for name in names]
