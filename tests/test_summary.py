"""
Unit tests for summary.py
"""

from decimal import Decimal

import pytest

from tipsplit_core.calculator import compute
from tipsplit_core.domain.entities import BillRequest, CalculationResult
from tipsplit_core.domain.errors import MissingOrInvalidTip
from tipsplit_core.domain.value_objects import SummaryFields
from tipsplit_core.summary import (
    build_summary_fields,
    describe_tip_percent,
    format_currency,
    format_summary,
)


class TestFormatCurrency:
    @pytest.mark.parametrize("value, expected", [
        (Decimal("6.375"), "$6.38"),
        (Decimal("48.875"), "$48.88"),
        (Decimal("24.4375"), "$24.44"),
        (0, "$0.00"),
        (1234.5, "$1,234.50"),
        ("42.5", "$42.50"),
        (Decimal("-5"), "-$5.00"),
    ])
    def test_formats(self, value, expected):
        assert format_currency(value) == expected

    @pytest.mark.parametrize("value", [None, "abc", float("nan"), float("inf"), Decimal("NaN")])
    def test_degrades_to_zero(self, value):
        assert format_currency(value) == "$0.00"

    def test_custom_symbol(self):
        assert format_currency(Decimal("3.5"), "€") == "€3.50"

    def test_large_amount_keeps_cents(self):
        assert format_currency(Decimal("1e30")).endswith(".00")


class TestDescribeTipPercent:
    def test_custom_verbatim(self):
        assert describe_tip_percent(0.15, " 17 ") == "17"

    def test_preset_one_decimal(self):
        assert describe_tip_percent(0.15, "") == "15.0"
        assert describe_tip_percent(0.12, None) == "12.0"

    def test_nothing(self):
        assert describe_tip_percent(None, "  ") is None

    @pytest.mark.parametrize("preset", ["abc", "NaN", float("inf"), Decimal("sNaN")])
    def test_unusable_preset(self, preset):
        assert describe_tip_percent(preset, None) is None

    def test_text_and_decimal_presets(self):
        assert describe_tip_percent("0.18") == "18.0"
        assert describe_tip_percent(Decimal("0.125")) == "12.5"


class TestFormatSummary:
    def test_layout(self):
        fields = SummaryFields(
            bill="$42.50",
            tip_percent="15.0",
            people="2",
            tip_amount="$6.38",
            total="$48.88",
            per_person="$24.44",
        )
        assert format_summary(fields) == (
            "Bill: $42.50\n"
            "Tip: 15.0%\n"
            "People: 2\n"
            "—\n"
            "Tip Amount: $6.38\n"
            "Total: $48.88\n"
            "Per Person: $24.44"
        )

    @pytest.mark.parametrize("tip_percent", [None, ""])
    def test_placeholder_for_missing_tip(self, tip_percent):
        fields = SummaryFields(
            bill="$30.00", tip_percent=tip_percent, people="1",
            tip_amount="$0.00", total="$0.00", per_person="$0.00",
        )
        assert format_summary(fields).splitlines()[1] == "Tip: —%"


class TestBuildSummaryFields:
    def test_from_result(self):
        request = BillRequest(bill_amount="42.50", preset_rate=0.15, people_count=2)
        fields = build_summary_fields(request, compute(request))
        assert fields == SummaryFields(
            bill="$42.50",
            tip_percent="15.0",
            people="2",
            tip_amount="$6.38",
            total="$48.88",
            per_person="$24.44",
        )

    def test_without_result(self):
        """Nothing calculated yet: amounts show zero, bill parsed leniently"""
        request = BillRequest(bill_amount="oops", custom_tip_percent="18", people_count=3)
        fields = build_summary_fields(request, None)
        assert fields.bill == "$0.00"
        assert fields.tip_percent == "18"
        assert fields.tip_amount == "$0.00"
        assert fields.total == "$0.00"
        assert fields.per_person == "$0.00"

    def test_unparseable_preset_uses_placeholder(self):
        """Summary still renders when the preset cannot be read"""
        request = BillRequest(bill_amount="30", preset_rate="abc")
        assert isinstance(compute(request), MissingOrInvalidTip)
        text = format_summary(build_summary_fields(request, None))
        assert text.splitlines()[1] == "Tip: —%"

    def test_symbol(self):
        request = BillRequest(bill_amount="10", preset_rate=0.10)
        result = CalculationResult(
            tip_amount=Decimal("1"), total=Decimal("11"), per_person=Decimal("11"),
        )
        fields = build_summary_fields(request, result, symbol="£")
        assert fields.total == "£11.00"

    def test_full_summary_text(self):
        request = BillRequest(
            bill_amount="50", custom_tip_percent="18", people_count=4,
            rounding_mode="round_per_person",
        )
        text = format_summary(build_summary_fields(request, compute(request)))
        assert "Tip: 18%" in text
        assert "Total: $60.00" in text
        assert "Per Person: $15.00" in text
        assert "Tip Amount: $9.00" in text
