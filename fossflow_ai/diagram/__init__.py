"""Compact diagram normalization module exports."""
from fossflow_ai.diagram.icon_resolver import build_icon_id_set, resolve_icon
from fossflow_ai.diagram.normalizer import normalize_compact_diagram, normalize_items, normalize_view
from fossflow_ai.diagram.summary import generate_diagram_summary

__all__ = [
    "build_icon_id_set",
    "resolve_icon",
    "normalize_compact_diagram",
    "normalize_items",
    "normalize_view",
    "generate_diagram_summary",
]
