"""How each order status is presented to shoppers."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StatusDisplay:
    label: str
    icon: str
    tone: str  # Colour family, e.g. "yellow"
    emphasis: str  # Badge classes

    @property
    def badge(self) -> str:
        return f"{self.icon} {self.label}"


def _display(label, icon, tone):
    return StatusDisplay(label=label, icon=icon, tone=tone, emphasis=f"bg-{tone}-100 text-{tone}-800")


STATUS_DISPLAY = {
    "Processing": _display("Processing", "⏳", "yellow"),
    "Shipped": _display("Shipped", "🚚", "blue"),
    "Delivered": _display("Delivered", "✓", "green"),
    "Cancelled": _display("Cancelled", "✕", "red"),
}

FALLBACK_ICON = "•"
FALLBACK_TONE = "gray"


def display_for(status: str) -> StatusDisplay:
    """The descriptor for ``status``; unknown statuses get a neutral badge with their own name."""
    known = STATUS_DISPLAY.get(status)
    if known is not None:
        return known
    return _display(status or "Unknown", FALLBACK_ICON, FALLBACK_TONE)


def format_date(value: datetime | str | None) -> str:
    """Render a timestamp the way the storefront shows it, e.g. ``October 15, 2025 at 09:30 AM``."""
    if value is None:
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{value:%B} {value.day}, {value:%Y} at {value:%I:%M %p}"


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"
