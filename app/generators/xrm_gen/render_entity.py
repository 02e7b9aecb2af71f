"""Entity-specific rendering functions for the TypeScript module."""
from functools import reduce
from typing import Iterable, List

from app.generators.xrm_gen.types import EntityDescriptor
from app.generators.xrm_gen.utils import (
    entity_route,
    first_upper,
    lookup_fixer,
    map_type,
)


def render_collection_interface(entity: EntityDescriptor) -> List[str]:
    """Generate the retrieve-multiple interface for an entity."""
    name = first_upper(entity.logical_name)
    return [
        f"//** @description WebAPI collection interface for {name} */",
        f"export interface I{name}s extends IRetrieveMultipleData<I{name}> {{}}",
    ]


def render_entity_interface(entity: EntityDescriptor) -> List[str]:
    """Generate the entity interface with one optional property per attribute."""
    name = first_upper(entity.logical_name)
    lines = [
        f"//** @description WebAPI interface for {name} */",
        f"export interface I{name} {{",
        "\t[key: string]: string | number",
    ]
    for attr in entity.attributes:
        lines.append(f"\t{lookup_fixer(attr)}?: {map_type(attr.attribute_type).value}")
    lines.append("}")
    return lines


def render_attributes(entity: EntityDescriptor) -> List[str]:
    """Generate the attribute-name map: logical name to Web API name."""
    name = first_upper(entity.logical_name)
    lines = [
        f"//** Collection of Attribute structures for {name} */",
        f"export class {name}Attributes {{",
    ]
    for attr in entity.attributes:
        lines.append(
            f'\t{attr.logical_name}:IAttribName = '
            f'{{ name:"{attr.logical_name}", api_name:"{lookup_fixer(attr)}" }}'
        )
    lines.append("}")
    return lines


def render_entity_class(entity: EntityDescriptor) -> List[str]:
    """Generate the entity class passed to Web API calls for init and returns."""
    name = first_upper(entity.logical_name)
    route = entity_route(entity.logical_name)

    lines = [
        f"/** @description Instantiates a {name} Entity to be used for CRUD based operations",
        "* @param {object} initData An optional parameter for a create and update entities */",
        f"export class {name} extends Entity {{",
        "\t[key: string]: string | number",
        f'\tpublic route: string = "{route}";',
        "",
    ]
    for attr in entity.attributes:
        lines.append(f"\tpublic {lookup_fixer(attr)}: {map_type(attr.attribute_type).value};")

    lines.extend([
        "",
        f"\tconstructor(initData?: I{name}) {{",
        f'\tsuper("{route}");',
        "\t\tif (initData == undefined)",
        "\t\t\treturn;",
    ])
    for attr in entity.attributes:
        fixed = lookup_fixer(attr)
        lines.append(f"\t\tthis.{fixed} = initData.{fixed};")
    lines.extend([
        f"\t\tthis.id = initData.{entity.primary_id_attribute};",
        "\t}",
        "}",
    ])
    return lines


def render_entity(rendered: str, entity: EntityDescriptor) -> str:
    """Append the blocks for one entity to the text rendered so far."""
    lines = [f"//** @description AUTO GENERATED CLASSES FOR {first_upper(entity.logical_name)}"]
    lines.extend(render_collection_interface(entity))
    lines.extend(render_entity_interface(entity))
    lines.extend(render_attributes(entity))
    lines.extend(render_entity_class(entity))
    return rendered + "\n".join(lines) + "\n"


def render_entities(entities: Iterable[EntityDescriptor]) -> str:
    """Render every entity in selection order."""
    return reduce(render_entity, entities, "")
