import logging
from fastapi import APIRouter, HTTPException
from app.core.config import settings
from app.generators.xrm_gen.generator import render_csharp
from app.generators.xrm_gen.render import load_template, render_typescript_module
from app.metadata.loader import MetadataError, check_primary_id
from app.schemas.generation import GenerateRequest, GenerateResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/generate")

@router.post("", response_model=GenerateResponse)
def generate(req: GenerateRequest):
    entities = [e.to_descriptor() for e in req.entities]
    try:
        for entity in entities:
            check_primary_id(entity)
    except MetadataError as e:
        raise HTTPException(status_code=400, detail=str(e))

    template = req.template if req.template is not None else load_template(settings.template_path)
    namespace = req.namespace or settings.namespace

    log.info("Generating code for %d entities", len(entities))
    return GenerateResponse(
        typescript=render_typescript_module(entities, template, settings.placeholder_token),
        csharp=render_csharp(entities, namespace=namespace),
        entity_count=len(entities),
    )
