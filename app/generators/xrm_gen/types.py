"""Dataclasses for CRM metadata code generation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class AttributeTypeCode(str, Enum):
    """Attribute type codes reported by the CRM metadata service."""
    BOOLEAN = "Boolean"
    CUSTOMER = "Customer"
    DATETIME = "DateTime"
    DECIMAL = "Decimal"
    DOUBLE = "Double"
    INTEGER = "Integer"
    LOOKUP = "Lookup"
    MEMO = "Memo"
    MONEY = "Money"
    OWNER = "Owner"
    PARTYLIST = "PartyList"
    PICKLIST = "Picklist"
    STATE = "State"
    STATUS = "Status"
    STRING = "String"
    UNIQUEIDENTIFIER = "Uniqueidentifier"
    CALENDARRULES = "CalendarRules"
    VIRTUAL = "Virtual"
    BIGINT = "BigInt"
    MANAGEDPROPERTY = "ManagedProperty"
    ENTITYNAME = "EntityName"

    @classmethod
    def parse(cls, value) -> Union["AttributeTypeCode", str, None]:
        """Return the matching member, the raw string for unseen codes, or None."""
        if value is None or value == "":
            return None
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        return str(value)


class TargetType(str, Enum):
    """Generated field types. Values are the TypeScript spellings."""
    NUMERIC = "number"
    TEXTUAL = "string"


@dataclass(frozen=True)
class AttributeDescriptor:
    """One attribute (field) of an entity."""
    logical_name: str
    attribute_type: Union[AttributeTypeCode, str, None]
    is_primary_id: bool = False


@dataclass(frozen=True)
class EntityDescriptor:
    """Entity definition selected for generation."""
    logical_name: str
    schema_name: str
    primary_id_attribute: str
    attributes: Tuple[AttributeDescriptor, ...] = field(default_factory=tuple)
    collection_name: Optional[str] = None  # LogicalCollectionName, when the metadata carries it


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from output directory
    content: str  # File contents
