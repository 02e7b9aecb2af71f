"""Orchestrator for CRM metadata code generation."""
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from app.generators.xrm_gen.class_model import build_class_model
from app.generators.xrm_gen.csharp import emit_namespace
from app.generators.xrm_gen.render import (
    PLACEHOLDER_TOKEN,
    load_template,
    render_typescript_module,
)
from app.generators.xrm_gen.types import EntityDescriptor, GeneratedFile

log = logging.getLogger(__name__)


def write_files(files: List[GeneratedFile], out_dir: Path) -> None:
    """Write generated files under out_dir, replacing existing ones."""
    for file in files:
        file_path = out_dir / file.path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file.content, encoding="utf-8")


def render_csharp(entities: Sequence[EntityDescriptor], namespace: str = "Xrm") -> str:
    """Build the class model for the entities and emit it as C# source."""
    return emit_namespace(build_class_model(entities, namespace=namespace))


def generate_xrm(
    entities: Sequence[EntityDescriptor],
    out_dir: Path,
    template: Optional[str] = None,
    token: str = PLACEHOLDER_TOKEN,
    namespace: str = "Xrm",
    typescript_file: str = "Xrm.ts",
    csharp_file: str = "Xrm.cs",
) -> List[GeneratedFile]:
    """
    Generate the C# class file and the TypeScript module for the entities.

    Args:
        entities: Selected entities, in selection order
        out_dir: Output directory for generated files
        template: TypeScript module template; the packaged one when omitted
        token: Placeholder token replaced by the rendered entities
        namespace: Namespace of the generated C# classes
        typescript_file: File name of the TypeScript module
        csharp_file: File name of the C# class file

    Returns:
        List of GeneratedFile objects
    """
    if template is None:
        template = load_template()

    files = [
        GeneratedFile(path=csharp_file, content=render_csharp(entities, namespace)),
        GeneratedFile(path=typescript_file, content=render_typescript_module(entities, template, token)),
    ]

    write_files(files, out_dir)
    log.info("Generated %d files for %d entities in %s", len(files), len(entities), out_dir)

    return files
