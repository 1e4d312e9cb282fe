"""Resolve free-form icon labels onto known icon ids.

Labels come from the LLM or from older payloads, so they may be in any case,
use spaces/hyphens/underscores interchangeably, or name a legacy concept
("database", "person") instead of a catalog id. Resolution never fails: an
unrecognised label maps to ``DEFAULT_ICON``.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import AbstractSet, Any, FrozenSet, Iterable, Mapping, Optional

from fossflow_ai.diagram.icon_catalog import AVAILABLE_ICON_IDS, DEFAULT_ICON
from fossflow_ai.diagram.values import to_safe_string

# Legacy/alternate name -> catalog id. Keys use underscores as separators.
LEGACY_ICON_MAP: Mapping[str, str] = MappingProxyType({
    "person": "user",
    "web_app": "desktop",
    "webapp": "desktop",
    "api": "server",
    "load_balancer": "loadbalancer",
    "loadbalancer": "loadbalancer",
    "microservice": "cube",
    "redis": "cache",
    "authentication": "lock",
    "shield": "firewall",
    "gateway": "router",
    "bank": "paymentcard",
    "database": "storage",
    "notification": "mail",
    "monitoring": "desktop",
    "cdn": "cloud",
    "mobile": "mobiledevice",
    "backup": "storage",
    "analytics": "diamond",
    "logs": "document",
})

_SPACE_OR_HYPHEN_RE = re.compile(r"[\s-]+")
_ANY_SEPARATOR_RE = re.compile(r"[-_\s]+")


def _host_icon_id(icon: Any) -> Optional[str]:
    if isinstance(icon, str):
        return icon or None
    if isinstance(icon, Mapping):
        value = icon.get("id")
    else:
        value = getattr(icon, "id", None)
    if value is None or value == "":
        return None
    return str(value)


def build_icon_id_set(existing_icons: Optional[Iterable[Any]] = None) -> FrozenSet[str]:
    """Return the built-in icon ids plus any ids registered by the host.

    Host icons may be plain strings, mappings with an ``id`` key, or objects
    with an ``id`` attribute; entries without an id are ignored. Ids are kept
    verbatim, and ``resolve_icon`` matches lower-cased input, so host ids
    containing upper-case letters are never returned.
    """
    ids = set(AVAILABLE_ICON_IDS)
    if existing_icons is not None and not isinstance(existing_icons, (str, bytes)):
        for icon in existing_icons:
            icon_id = _host_icon_id(icon)
            if icon_id:
                ids.add(icon_id)
    return frozenset(ids)


def resolve_icon(raw_icon: Any, known_icons: AbstractSet[str]) -> str:
    """Map *raw_icon* onto a member of *known_icons*; first match wins.

    1. blank -> default icon
    2. exact (case-folded) id
    3. legacy alias, after collapsing spaces/hyphens to underscores
    4. underscores replaced by hyphens
    5. all separators stripped
    6. default icon
    """
    raw = to_safe_string(raw_icon).strip().lower()
    if not raw:
        return DEFAULT_ICON
    if raw in known_icons:
        return raw

    normalized_key = _SPACE_OR_HYPHEN_RE.sub("_", raw)
    mapped = LEGACY_ICON_MAP.get(normalized_key) or LEGACY_ICON_MAP.get(raw)
    if mapped and mapped in known_icons:
        return mapped

    hyphen_candidate = raw.replace("_", "-")
    if hyphen_candidate in known_icons:
        return hyphen_candidate

    compact_candidate = _ANY_SEPARATOR_RE.sub("", raw)
    if compact_candidate in known_icons:
        return compact_candidate

    return DEFAULT_ICON
