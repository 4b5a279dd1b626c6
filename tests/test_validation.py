import pytest

from laliga_tracker.domain.errors import ValidationError
from laliga_tracker.domain.validation import (
    is_valid_time_format,
    require_fields,
    require_time_format,
)


@pytest.mark.parametrize("value", ["05:00", "12:59", "0:00", "99:59", "00:00", "9:05"])
def test_time_format_accepts_mm_ss(value):
    assert is_valid_time_format(value)


@pytest.mark.parametrize("value", [
    "5:60",      # seconds out of range
    "100:00",    # three-digit minutes
    "5",         # no seconds
    "",
    "05:0",      # one-digit seconds
    "05:000",
    "ab:cd",
    " 05:00",
    "05:00\n",
    "-1:00",
    None,
])
def test_time_format_rejects_everything_else(value):
    assert not is_valid_time_format(value)


def test_require_time_format_raises_validation_error():
    with pytest.raises(ValidationError) as exc:
        require_time_format("5:60")
    assert exc.value.status_code == 400
    assert "MM:SS" in exc.value.message


def test_require_fields_passes_when_all_present():
    require_fields(home_team="Sevilla", away_team="Villarreal", match_date="2025-06-15")


@pytest.mark.parametrize("fields", [
    {"home_team": "", "away_team": "Villarreal", "match_date": "2025-06-15"},
    {"home_team": "Sevilla", "away_team": "", "match_date": "2025-06-15"},
    {"home_team": "Sevilla", "away_team": "Villarreal", "match_date": ""},
    {"home_team": None, "away_team": "Villarreal", "match_date": "2025-06-15"},
])
def test_require_fields_rejects_any_empty_field(fields):
    with pytest.raises(ValidationError):
        require_fields(**fields)
