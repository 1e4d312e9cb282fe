"""Best-effort normalization of compact diagram payloads.

Turns untrusted JSON (LLM output or hand-edited paste) into a canonical
``CompactDiagram``. Nothing here raises on bad input: entries that cannot be
trusted are dropped, missing pieces are synthesized. The strict counterpart
for fresh LLM output is ``fossflow_ai.tools.schema_validator``.
"""
from __future__ import annotations

import math
from typing import AbstractSet, Any, Iterable, List, Optional, Set

from fossflow_ai.diagram.icon_resolver import build_icon_id_set, resolve_icon
from fossflow_ai.diagram.values import round_half_up, to_finite_number, to_index, to_safe_string
from fossflow_ai.models.compact_diagram import (
    CompactDiagram,
    CompactItem,
    CompactView,
    Connection,
    FormatMeta,
    Position,
)

DEFAULT_TITLE = "Untitled"
AUTO_LAYOUT_MIN_COLUMNS = 4
AUTO_LAYOUT_SPACING = 4


def _as_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def normalize_items(raw: Any, known_icons: AbstractSet[str]) -> List[CompactItem]:
    """Coerce each raw entry into ``(name, icon, description)``.

    Output index ``i`` always corresponds to input index ``i``.
    """
    items: List[CompactItem] = []
    for index, entry in enumerate(_as_list(raw)):
        fields = _as_list(entry)
        name = to_safe_string(fields[0] if len(fields) > 0 else None).strip() or f"Item {index + 1}"
        icon = resolve_icon(to_safe_string(fields[1] if len(fields) > 1 else None), known_icons)
        description = to_safe_string(fields[2] if len(fields) > 2 else None)
        items.append(CompactItem(name=name, icon=icon, description=description))
    return items


def auto_layout_positions(item_count: int, used_indices: AbstractSet[int]) -> List[Position]:
    """Grid positions for every index in ``range(item_count)`` not yet used."""
    positions: List[Position] = []
    if item_count <= 0:
        return positions

    columns = max(AUTO_LAYOUT_MIN_COLUMNS, math.ceil(math.sqrt(item_count)))
    placed = 0
    for index in range(item_count):
        if index in used_indices:
            continue
        col = placed % columns
        row = placed // columns
        positions.append(Position(item_index=index, x=col * AUTO_LAYOUT_SPACING, y=row * AUTO_LAYOUT_SPACING))
        placed += 1
    return positions


def _normalize_positions(raw_positions: Iterable[Any], item_count: int) -> List[Position]:
    positions: List[Position] = []
    used: Set[int] = set()
    for entry in raw_positions:
        if not isinstance(entry, (list, tuple)) or len(entry) < 3:
            continue
        x = to_finite_number(entry[1])
        y = to_finite_number(entry[2])
        if x is None or y is None:
            continue
        item_index = to_index(entry[0], item_count)
        # first placement of an item wins
        if item_index is None or item_index in used:
            continue
        used.add(item_index)
        positions.append(Position(item_index=item_index, x=round_half_up(x), y=round_half_up(y)))
    return positions


def _normalize_connections(raw_connections: Iterable[Any], item_count: int) -> List[Connection]:
    connections: List[Connection] = []
    for entry in raw_connections:
        if not isinstance(entry, (list, tuple)) or len(entry) < 2:
            continue
        from_index = to_index(entry[0], item_count)
        to_index_ = to_index(entry[1], item_count)
        if from_index is None or to_index_ is None:
            continue
        connections.append(Connection(from_index=from_index, to_index=to_index_))
    return connections


def normalize_view(raw: Any, item_count: int, ensure_full_coverage: bool) -> CompactView:
    """Repair one ``[positions, connections]`` view against *item_count*.

    With *ensure_full_coverage*, items lacking an explicit position are
    auto-laid-out so every item appears exactly once.
    """
    raw_view = _as_list(raw)
    raw_positions = _as_list(raw_view[0]) if len(raw_view) > 0 else []
    raw_connections = _as_list(raw_view[1]) if len(raw_view) > 1 else []

    positions = _normalize_positions(raw_positions, item_count)
    if ensure_full_coverage:
        used = {p.item_index for p in positions}
        positions.extend(auto_layout_positions(item_count, used))

    connections = _normalize_connections(raw_connections, item_count)
    return CompactView(positions=positions, connections=connections)


def normalize_compact_diagram(raw: Any, existing_icons: Optional[Iterable[Any]] = None) -> CompactDiagram:
    """Normalize a whole payload; never raises.

    Only the first view is forced to cover every item. Later views are
    optional partial layouts and keep just their valid explicit positions.
    """
    data = raw if isinstance(raw, dict) else {}
    icon_ids = build_icon_id_set(existing_icons)

    title = to_safe_string(data.get("t")).strip() or DEFAULT_TITLE
    items = normalize_items(data.get("i"), icon_ids)

    raw_views = _as_list(data.get("v")) or [[]]
    views = [
        normalize_view(view, len(items), ensure_full_coverage=index == 0)
        for index, view in enumerate(raw_views)
    ]

    return CompactDiagram(title=title, items=items, views=views, meta=FormatMeta())
