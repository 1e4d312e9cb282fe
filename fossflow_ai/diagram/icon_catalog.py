"""Built-in isometric icon catalog.

Read-only reference data: the icon ids the LLM is told about and that every
normalized item resolves to (together with any icons the host registered).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class IconInfo:
    id: str
    name: str
    description: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}


DEFAULT_ICON = "block"

AVAILABLE_ICONS: Tuple[IconInfo, ...] = (
    IconInfo("block", "Block", "Generic component"),
    IconInfo("cache", "Cache", "Cache or in-memory store"),
    IconInfo("cardterminal", "Card Terminal", "POS or payment terminal"),
    IconInfo("cloud", "Cloud", "Cloud or CDN"),
    IconInfo("cronjob", "Cron Job", "Scheduled job"),
    IconInfo("cube", "Service", "Service or microservice"),
    IconInfo("desktop", "Desktop", "Web app or UI"),
    IconInfo("diamond", "Decision", "Decision or analytics"),
    IconInfo("dns", "DNS", "DNS or naming"),
    IconInfo("document", "Document", "Docs or logs"),
    IconInfo("firewall", "Firewall", "Security or WAF"),
    IconInfo("function-module", "Function", "Serverless function"),
    IconInfo("image", "Image", "Asset or media"),
    IconInfo("laptop", "Laptop", "Client device"),
    IconInfo("loadbalancer", "Load Balancer", "Traffic distribution"),
    IconInfo("lock", "Lock", "Authentication or security"),
    IconInfo("mail", "Mail", "Notification or email"),
    IconInfo("mailmultiple", "Mail Multiple", "Bulk notification"),
    IconInfo("mobiledevice", "Mobile", "Mobile app"),
    IconInfo("office", "Office", "Organization or team"),
    IconInfo("package-module", "Module", "Service module"),
    IconInfo("paymentcard", "Payment Card", "Payment or billing"),
    IconInfo("plane", "Plane", "Transport or network"),
    IconInfo("printer", "Printer", "Peripheral or output"),
    IconInfo("pyramid", "Pyramid", "Hierarchy or layered system"),
    IconInfo("queue", "Queue", "Message queue"),
    IconInfo("router", "Router", "Gateway or routing"),
    IconInfo("server", "Server", "API or backend service"),
    IconInfo("speech", "Speech", "Chat or messaging"),
    IconInfo("sphere", "Sphere", "Global service"),
    IconInfo("storage", "Storage", "Database or storage"),
    IconInfo("switch-module", "Switch", "Network switch"),
    IconInfo("tower", "Tower", "Control tower"),
    IconInfo("truck-2", "Truck", "Logistics"),
    IconInfo("truck", "Truck", "Logistics"),
    IconInfo("user", "User", "Human user or actor"),
    IconInfo("vm", "VM", "Virtual machine"),
)

AVAILABLE_ICON_IDS: Tuple[str, ...] = tuple(icon.id for icon in AVAILABLE_ICONS)


def format_icon_reference() -> str:
    """Render the catalog as ``- id: description`` lines."""
    return "\n".join(f"- {icon.id}: {icon.description}" for icon in AVAILABLE_ICONS)
