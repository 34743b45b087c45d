from datetime import UTC, datetime

import pytest
from storefront.display import STATUS_DISPLAY, display_for, format_date, format_money


class TestStatusDisplay:
    @pytest.mark.parametrize(
        "status,icon,tone",
        [
            ("Processing", "⏳", "yellow"),
            ("Shipped", "🚚", "blue"),
            ("Delivered", "✓", "green"),
            ("Cancelled", "✕", "red"),
        ],
    )
    def test_known_statuses(self, status, icon, tone):
        display = display_for(status)
        assert display.icon == icon
        assert display.tone == tone
        assert display.emphasis == f"bg-{tone}-100 text-{tone}-800"
        assert display.label == status

    def test_unknown_status_falls_back(self):
        display = display_for("Returned")
        assert display.icon == "•"
        assert display.tone == "gray"
        assert display.label == "Returned"

    def test_descriptors_are_shared(self):
        assert display_for("Shipped") is STATUS_DISPLAY["Shipped"]

    def test_badge(self):
        assert display_for("Shipped").badge == "🚚 Shipped"


class TestFormatting:
    def test_format_datetime(self):
        assert format_date(datetime(2025, 10, 15, 9, 5, tzinfo=UTC)) == "October 15, 2025 at 09:05 AM"

    def test_format_iso_string(self):
        assert format_date("2025-11-08T14:30:00Z") == "November 8, 2025 at 02:30 PM"

    def test_format_missing(self):
        assert format_date(None) == ""

    def test_format_money(self):
        assert format_money(1259.5) == "$1,259.50"
