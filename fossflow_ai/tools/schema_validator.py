"""Strict schema check for compact diagrams returned by an LLM.

Fail-fast: the first structural defect raises ``CompactSchemaError`` naming
the offending field and index. Hand-edited payloads skip this check and go
straight to the normalizer, which repairs the same defects silently.
"""
from __future__ import annotations

import math
from typing import Any, Optional


class CompactSchemaError(ValueError):
    """Raised when an LLM payload does not have the compact diagram shape."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        index: Optional[int] = None,
        view_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.field = field
        self.index = index
        self.view_index = view_index


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def _is_non_blank_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _validate_items(items: list) -> None:
    for index, item in enumerate(items):
        if not isinstance(item, list) or len(item) < 2:
            raise CompactSchemaError(
                f"Item at index {index} must be [name, icon, description?]", field="i", index=index
            )
        if not _is_non_blank_string(item[0]):
            raise CompactSchemaError(f"Item at index {index} must have a name", field="i.name", index=index)
        if not _is_non_blank_string(item[1]):
            raise CompactSchemaError(f"Item at index {index} must have an icon ID", field="i.icon", index=index)
        if len(item) > 2 and not isinstance(item[2], str):
            raise CompactSchemaError(
                f"Item description at index {index} must be a string if provided",
                field="i.description",
                index=index,
            )


def _validate_view(view: Any, view_index: int) -> None:
    if not isinstance(view, list) or len(view) < 2:
        raise CompactSchemaError(
            f"View at index {view_index} must be [positions, connections]", field="v", index=view_index
        )
    positions, connections = view[0], view[1]
    if not isinstance(positions, list) or not isinstance(connections, list):
        raise CompactSchemaError(
            f"View at index {view_index} must contain arrays for positions and connections",
            field="v",
            index=view_index,
        )

    for pos_index, pos in enumerate(positions):
        if not isinstance(pos, list) or len(pos) < 3:
            raise CompactSchemaError(
                f"Position at index {pos_index} in view {view_index} must be [itemIndex, x, y]",
                field="v.positions",
                index=pos_index,
                view_index=view_index,
            )
        if not all(_is_number(value) for value in pos[:3]):
            raise CompactSchemaError(
                f"Position at index {pos_index} in view {view_index} must contain numbers",
                field="v.positions",
                index=pos_index,
                view_index=view_index,
            )

    for conn_index, conn in enumerate(connections):
        if not isinstance(conn, list) or len(conn) < 2:
            raise CompactSchemaError(
                f"Connection at index {conn_index} in view {view_index} must be [fromIndex, toIndex]",
                field="v.connections",
                index=conn_index,
                view_index=view_index,
            )
        if not all(_is_number(value) for value in conn[:2]):
            raise CompactSchemaError(
                f"Connection at index {conn_index} in view {view_index} must contain numbers",
                field="v.connections",
                index=conn_index,
                view_index=view_index,
            )


def validate_compact_diagram(data: Any) -> None:
    """Raise ``CompactSchemaError`` on the first defect in *data*."""
    if not isinstance(data, dict):
        raise CompactSchemaError("Diagram must be a JSON object", field="$")

    title = data.get("t")
    if not isinstance(title, str) or not title:
        raise CompactSchemaError('Diagram must have a title string in "t"', field="t")

    items = data.get("i")
    if not isinstance(items, list) or not items:
        raise CompactSchemaError('Diagram must have at least one item in "i"', field="i")
    _validate_items(items)

    views = data.get("v")
    if not isinstance(views, list):
        raise CompactSchemaError('Diagram must have a views array in "v"', field="v")
    for view_index, view in enumerate(views):
        _validate_view(view, view_index)
