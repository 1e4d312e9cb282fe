"""REST API server."""
from __future__ import annotations

from fastapi import FastAPI, HTTPException

from fossflow_ai.agents.diagram_agent import AIServiceError
from fossflow_ai.diagram.icon_catalog import AVAILABLE_ICONS
from fossflow_ai.diagram.normalizer import normalize_compact_diagram
from fossflow_ai.diagram.summary import generate_diagram_summary
from fossflow_ai.models.ai_config import AI_PRESETS
from fossflow_ai.schemas import (
    DiagramResponse,
    GenerateRequest,
    GenerateResponse,
    IconListResponse,
    IconResponse,
    NormalizeRequest,
    PresetListResponse,
    SummaryRequest,
    SummaryResponse,
    ValidateRequest,
    ValidateResponse,
)
from fossflow_ai.services.ai_config_service import load_ai_config
from fossflow_ai.services.diagram_service import GenerationInProgressError, apply_json, generate_diagram
from fossflow_ai.tools.response_parser import EmptyAIResponseError, InvalidDiagramJSONError
from fossflow_ai.tools.schema_validator import CompactSchemaError, validate_compact_diagram

app = FastAPI(title="FossFLOW AI Diagram API")


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/icons", response_model=IconListResponse)
def list_icons():
    return IconListResponse(icons=[IconResponse(**icon.to_dict()) for icon in AVAILABLE_ICONS])


@app.get("/api/ai/presets", response_model=PresetListResponse)
def list_presets():
    return PresetListResponse(presets=AI_PRESETS)


@app.post("/api/diagrams/normalize", response_model=DiagramResponse)
def normalize_api(payload: NormalizeRequest):
    if payload.text is not None:
        try:
            diagram = apply_json(payload.text, payload.existing_icons)
        except InvalidDiagramJSONError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    else:
        diagram = normalize_compact_diagram(payload.diagram, payload.existing_icons)
    return DiagramResponse(diagram=diagram.to_compact(), summary=generate_diagram_summary(diagram))


@app.post("/api/diagrams/validate", response_model=ValidateResponse)
def validate_api(payload: ValidateRequest):
    try:
        validate_compact_diagram(payload.diagram)
    except CompactSchemaError as exc:
        return ValidateResponse(
            valid=False,
            error=str(exc),
            field=exc.field,
            index=exc.index,
            view_index=exc.view_index,
        )
    return ValidateResponse(valid=True)


@app.post("/api/diagrams/summary", response_model=SummaryResponse)
def summary_api(payload: SummaryRequest):
    return SummaryResponse(summary=generate_diagram_summary(payload.diagram))


@app.post("/api/diagrams/generate", response_model=GenerateResponse)
def generate_api(payload: GenerateRequest):
    config = payload.config or load_ai_config()
    if config is None:
        raise HTTPException(status_code=400, detail="AI provider is not configured")
    try:
        result = generate_diagram(
            payload.prompt,
            config,
            locale=payload.locale,
            existing_icons=payload.existing_icons,
        )
    except GenerationInProgressError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except CompactSchemaError as exc:
        raise HTTPException(status_code=502, detail={"error": str(exc), "field": exc.field, "index": exc.index})
    except (InvalidDiagramJSONError, EmptyAIResponseError, AIServiceError) as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return GenerateResponse(**result.to_dict())
