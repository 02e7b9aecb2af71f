"""Template assembly for the generated TypeScript module."""
import logging
from pathlib import Path
from typing import Iterable, Optional

from app.generators.xrm_gen.render_entity import render_entities
from app.generators.xrm_gen.types import EntityDescriptor

log = logging.getLogger(__name__)

PLACEHOLDER_TOKEN = "{#rendered_content#}"
DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "templates" / "Xrm.ts"


def load_template(path: Optional[Path] = None) -> str:
    """Read the module template, defaulting to the packaged Xrm.ts."""
    template_path = Path(path) if path else DEFAULT_TEMPLATE_PATH
    return template_path.read_text(encoding="utf-8")


def substitute_placeholder(template: str, content: str, token: str = PLACEHOLDER_TOKEN) -> str:
    """Replace the first occurrence of the placeholder token with content.

    A template without the token is returned unchanged and the rendered
    content is dropped.
    """
    if token not in template:
        log.warning(
            "Template has no %s placeholder; rendered content dropped (%d chars)",
            token, len(content),
        )
        return template
    return template.replace(token, content, 1)


def render_typescript_module(
    entities: Iterable[EntityDescriptor],
    template: str,
    token: str = PLACEHOLDER_TOKEN,
) -> str:
    """Render all entities and substitute them into the template."""
    return substitute_placeholder(template, render_entities(entities), token)
