"""
Tests for use_cases.preset_comparison
"""

import pandas as pd
import pytest

from tipsplit_core.domain.errors import InvalidBillAmount, InvalidPeopleCount
from tipsplit_core.domain.value_objects import RoundingMode
from tipsplit_core.use_cases.preset_comparison import COLUMNS, compare_presets


class TestComparePresets:
    def test_one_row_per_default_preset(self):
        df = compare_presets("100", people_count=2)
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == COLUMNS
        assert len(df) == 6
        assert df["tip_percent"].tolist() == pytest.approx([10, 12, 15, 18, 20, 25])

    def test_values(self):
        df = compare_presets(100, people_count=4, rates=[0.10, 0.20])
        assert df.iloc[0]["tip_amount"] == pytest.approx(10.0)
        assert df.iloc[0]["total"] == pytest.approx(110.0)
        assert df.iloc[0]["per_person"] == pytest.approx(27.5)
        assert df.iloc[1]["per_person"] == pytest.approx(30.0)

    def test_rounding_applies_to_every_row(self):
        df = compare_presets(
            "50", people_count=4, rates=[0.18],
            rounding_mode=RoundingMode.ROUND_PER_PERSON,
        )
        assert df.iloc[0]["per_person"] == pytest.approx(15.0)
        assert df.iloc[0]["total"] == pytest.approx(60.0)
        assert df.iloc[0]["tip_amount"] == pytest.approx(9.0)

    def test_rounding_by_label(self):
        df = compare_presets("42.50", people_count=2, rates=[0.15], rounding_mode="Round total")
        assert df.iloc[0]["total"] == pytest.approx(49.0)

    def test_per_person_increases_with_tip(self):
        df = compare_presets("80", people_count=3)
        assert df["per_person"].is_monotonic_increasing

    def test_invalid_bill_raises(self):
        with pytest.raises(InvalidBillAmount):
            compare_presets("0")

    def test_invalid_people_raises(self):
        with pytest.raises(InvalidPeopleCount):
            compare_presets("10", people_count=0)

    def test_empty_rates(self):
        df = compare_presets("10", rates=[])
        assert df.empty
        assert list(df.columns) == COLUMNS
