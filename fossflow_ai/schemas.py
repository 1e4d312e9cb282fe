"""Pydantic schemas for API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from fossflow_ai.models.ai_config import AIServiceConfig


class IconResponse(BaseModel):
    id: str
    name: str
    description: str


class IconListResponse(BaseModel):
    icons: List[IconResponse]


class PresetListResponse(BaseModel):
    presets: Dict[str, Dict[str, Any]]


class NormalizeRequest(BaseModel):
    diagram: Any = None
    text: Optional[str] = None
    existing_icons: List[Any] = Field(default_factory=list)


class DiagramResponse(BaseModel):
    diagram: Dict[str, Any]
    summary: str


class ValidateRequest(BaseModel):
    diagram: Any = None


class ValidateResponse(BaseModel):
    valid: bool
    error: Optional[str] = None
    field: Optional[str] = None
    index: Optional[int] = None
    view_index: Optional[int] = None


class SummaryRequest(BaseModel):
    diagram: Any = None


class SummaryResponse(BaseModel):
    summary: str


class GenerateRequest(BaseModel):
    prompt: str
    locale: Optional[str] = None
    config: Optional[AIServiceConfig] = None
    existing_icons: List[Any] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    raw: Dict[str, Any]
    diagram: Dict[str, Any]
    summary: str
