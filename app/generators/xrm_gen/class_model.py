"""Abstract class model built from entity metadata."""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from app.generators.xrm_gen.types import EntityDescriptor, TargetType
from app.generators.xrm_gen.utils import (
    class_name,
    collection_route,
    map_clr_type,
    map_type,
)

log = logging.getLogger(__name__)

ROUTE_FIELD = "route"


@dataclass
class CodeField:
    name: str
    target_type: TargetType
    clr_type: str
    is_const: bool = False
    init_value: Optional[str] = None


@dataclass
class CodeClass:
    name: str
    fields: List[CodeField] = field(default_factory=list)


@dataclass
class CodeNamespace:
    name: str
    classes: List[CodeClass] = field(default_factory=list)


def build_entity_class(entity: EntityDescriptor) -> CodeClass:
    """Build the class for one entity.

    Fields keep the raw attribute logical names. A ``route`` constant holding
    the entity's collection name is appended after the attribute fields.
    """
    code_class = CodeClass(name=class_name(entity))

    for attr in entity.attributes:
        if attr.attribute_type is None:
            log.warning(
                "Skipping attribute %s.%s: no attribute type",
                entity.logical_name, attr.logical_name,
                extra={"stage": "BUILD_CLASS_MODEL"},
            )
            continue
        if attr.logical_name == ROUTE_FIELD:
            log.warning(
                "Skipping attribute %s.%s: name clashes with the route constant",
                entity.logical_name, attr.logical_name,
                extra={"stage": "BUILD_CLASS_MODEL"},
            )
            continue
        code_class.fields.append(CodeField(
            name=attr.logical_name,
            target_type=map_type(attr.attribute_type),
            clr_type=map_clr_type(attr.attribute_type),
        ))

    code_class.fields.append(CodeField(
        name=ROUTE_FIELD,
        target_type=TargetType.TEXTUAL,
        clr_type="string",
        is_const=True,
        init_value=collection_route(entity),
    ))
    return code_class


def build_class_model(entities: Iterable[EntityDescriptor], namespace: str = "Xrm") -> CodeNamespace:
    """Build a namespace holding one class per entity, in selection order."""
    return CodeNamespace(
        name=namespace,
        classes=[build_entity_class(entity) for entity in entities],
    )
