"""Human-readable preview of a compact diagram."""
from __future__ import annotations

from typing import Any, List, Union

from fossflow_ai.diagram.icon_catalog import DEFAULT_ICON
from fossflow_ai.diagram.values import to_finite_number, to_index, to_safe_string
from fossflow_ai.models.compact_diagram import CompactDiagram


def _item_name(items: list, index: Any) -> str:
    position = to_index(index, len(items))
    if position is not None:
        entry = items[position]
        if isinstance(entry, (list, tuple)) and entry:
            name = to_safe_string(entry[0]).strip()
            if name:
                return name
    number = to_finite_number(index)
    label = int(number) + 1 if number is not None and number.is_integer() else to_safe_string(index)
    return f"Item {label}"


def generate_diagram_summary(diagram: Union[CompactDiagram, dict, Any]) -> str:
    """Summarize title, items and first-view connectors.

    Accepts raw payloads as well as normalized diagrams; nothing is repaired.
    """
    data = diagram.to_compact() if isinstance(diagram, CompactDiagram) else diagram
    if not isinstance(data, dict):
        data = {}

    lines: List[str] = []
    title = to_safe_string(data.get("t")).strip() or "Untitled"
    lines.append(f"📊 {title}")

    items = data.get("i") if isinstance(data.get("i"), list) else []
    lines.append("")
    lines.append(f"🔲 {len(items)} item(s):")
    for index, item in enumerate(items):
        if not isinstance(item, (list, tuple)):
            continue
        name = to_safe_string(item[0] if len(item) > 0 else None).strip() or f"Item {index + 1}"
        icon = to_safe_string(item[1] if len(item) > 1 else None).strip() or DEFAULT_ICON
        lines.append(f"  • {name} ({icon})")

    views = data.get("v") if isinstance(data.get("v"), list) else []
    first_view = views[0] if views else None
    connections: list = []
    if isinstance(first_view, (list, tuple)) and len(first_view) > 1 and isinstance(first_view[1], list):
        connections = first_view[1]

    lines.append("")
    lines.append(f"🔗 {len(connections)} connector(s):")
    for conn in connections:
        if not isinstance(conn, (list, tuple)) or len(conn) < 2:
            continue
        lines.append(f"  • {_item_name(items, conn[0])} → {_item_name(items, conn[1])}")

    return "\n".join(lines)
