"""Type mapping and naming helpers for CRM code generation."""
from app.generators.xrm_gen.types import (
    AttributeDescriptor,
    AttributeTypeCode,
    EntityDescriptor,
    TargetType,
)


INTEGER_TYPE_CODES = {
    AttributeTypeCode.INTEGER,
    AttributeTypeCode.BIGINT,
    AttributeTypeCode.VIRTUAL,
    AttributeTypeCode.STATE,
}

DECIMAL_TYPE_CODES = {
    AttributeTypeCode.MONEY,
    AttributeTypeCode.DECIMAL,
    AttributeTypeCode.DOUBLE,
}

NUMERIC_TYPE_CODES = INTEGER_TYPE_CODES | DECIMAL_TYPE_CODES


def map_type(type_code) -> TargetType:
    """Map an attribute type code to the generated field type.

    Unknown and missing codes fall back to TEXTUAL, so booleans and dates
    are rendered as strings.
    """
    if type_code in NUMERIC_TYPE_CODES:
        return TargetType.NUMERIC
    return TargetType.TEXTUAL


def map_clr_type(type_code) -> str:
    """Map an attribute type code to a C# type keyword."""
    if type_code in INTEGER_TYPE_CODES:
        return "int"
    if type_code in DECIMAL_TYPE_CODES:
        return "decimal"
    return "string"


def first_upper(name: str) -> str:
    """Upper-case the first character only. Empty names pass through."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def lookup_fixer(attribute: AttributeDescriptor) -> str:
    """Return the Web API key for an attribute.

    Lookup values are exposed as ``_<name>_value`` unless the attribute is the
    primary id or its name contains "activity".
    """
    name = attribute.logical_name
    if (
        attribute.attribute_type == AttributeTypeCode.LOOKUP
        and not attribute.is_primary_id
        and "activity" not in name
    ):
        return f"_{name}_value"
    return name


def entity_route(logical_name: str) -> str:
    """Route used by the generated TypeScript entity class."""
    return first_upper(logical_name).lower() + "s"


def collection_route(entity: EntityDescriptor) -> str:
    """Route used by the class model: the collection name, else a naive plural."""
    if entity.collection_name:
        return entity.collection_name
    return entity.logical_name + "s"


def class_name(entity: EntityDescriptor) -> str:
    """Name of the generated class model type."""
    return entity.schema_name or first_upper(entity.logical_name)
