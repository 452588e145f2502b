"""
History summary over stored daily calorie rows.
"""
import pytest

from core.errors import ValidationError
from core.history import summarize_history

ROWS = [
    {"date": "2024-05-01", "total_calories": 2100, "calories_burned": 300},
    {"date": "2024-05-03", "total_calories": 1800, "calories_burned": None},
    {"date": "2024-05-02", "total_calories": 2400, "calories_burned": 500},
    # second entry for the same day is folded in
    {"date": "2024-05-02", "total_calories": 100},
]


def test_empty_history():
    out = summarize_history([])
    assert out["days"] == []
    assert out["average_intake"] == 0.0


def test_days_newest_first_with_balance():
    days = summarize_history(ROWS)["days"]
    assert [d["date"] for d in days] == ["2024-05-03", "2024-05-02", "2024-05-01"]
    assert days[0]["calories_burned"] == 0.0
    assert days[1]["total_calories"] == 2500.0
    assert days[1]["balance"] == 2000.0
    assert days[2]["balance"] == 1800.0


def test_averages():
    out = summarize_history(ROWS)
    assert out["average_intake"] == pytest.approx((2100 + 1800 + 2500) / 3, abs=0.1)
    assert out["average_burned"] == pytest.approx(800 / 3, abs=0.1)
    assert out["average_balance"] == pytest.approx((1800 + 1800 + 2000) / 3, abs=0.1)


def test_missing_burned_column():
    out = summarize_history([{"date": "2024-05-01", "total_calories": 1500}])
    assert out["days"][0]["balance"] == 1500.0


@pytest.mark.parametrize(
    "rows",
    [
        [{"total_calories": 100}],
        [{"date": "2024-05-01", "total_calories": "plenty"}],
        [{"date": "not a date", "total_calories": 100}],
        ["2024-05-01"],
    ],
)
def test_malformed_rows(rows):
    with pytest.raises(ValidationError):
        summarize_history(rows)
