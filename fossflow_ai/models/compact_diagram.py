"""Canonical compact diagram model (the normalized, trusted structure).

The wire shape exchanged with the LLM (and pasted by users) is positional:

    {
      "t": "<title>",
      "i": [["<name>", "<icon-id>", "<description>?"], ...],
      "v": [[[[itemIndex, x, y], ...], [[fromIndex, toIndex], ...]], ...],
      "_": {"f": "compact", "v": "1.0"}
    }

Only the normalizer builds these models from raw data; everything downstream
works on them rather than on the untyped payload.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

COMPACT_FORMAT = "compact"
COMPACT_VERSION = "1.0"


class FormatMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    f: Literal["compact"] = COMPACT_FORMAT
    v: Literal["1.0"] = COMPACT_VERSION


class CompactItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1)
    description: str = ""

    def to_compact(self) -> List[str]:
        return [self.name, self.icon, self.description]


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_index: int = Field(..., ge=0)
    x: int
    y: int

    def to_compact(self) -> List[int]:
        return [self.item_index, self.x, self.y]


class Connection(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_index: int = Field(..., ge=0)
    to_index: int = Field(..., ge=0)

    def to_compact(self) -> List[int]:
        return [self.from_index, self.to_index]


class CompactView(BaseModel):
    model_config = ConfigDict(frozen=True)

    positions: List[Position] = Field(default_factory=list)
    connections: List[Connection] = Field(default_factory=list)

    def to_compact(self) -> List[List[List[int]]]:
        return [
            [p.to_compact() for p in self.positions],
            [c.to_compact() for c in self.connections],
        ]


class CompactDiagram(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    items: List[CompactItem] = Field(default_factory=list)
    views: List[CompactView] = Field(..., min_length=1)
    meta: FormatMeta = Field(default_factory=FormatMeta)

    def to_compact(self) -> Dict[str, Any]:
        """Serialize back to the positional wire format."""
        return {
            "t": self.title,
            "i": [item.to_compact() for item in self.items],
            "v": [view.to_compact() for view in self.views],
            "_": self.meta.model_dump(),
        }

