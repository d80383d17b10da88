from datetime import date

import pytest

from lake_level.errors import DateParseError
from lake_level.infra.scrape_values import parse_date, parse_level


@pytest.mark.parametrize(
    "text, expected",
    [
        ("700.5 msm", 700.5),
        ("750.0 msm", 750.0),
        ("677.00msm", 677.0),
        ("  675.12 msm*  ", 675.12),
        ("Niveau: 675.12 msm (provisoire)", 675.12),
    ],
)
def test_parse_level_reads_first_decimal_before_unit(text, expected):
    assert parse_level(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["700.5", "700 msm", "", "n/a", "msm 700.5", None])
def test_parse_level_returns_zero_when_unreadable(text):
    assert parse_level(text) == 0.0


def test_parse_level_takes_leftmost_match():
    assert parse_level("675.10 msm / 675.90 msm") == pytest.approx(675.10)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.6.2023", date(2023, 6, 1)),
        ("01.06.2023", date(2023, 6, 1)),
        ("  31.12.2022\n", date(2022, 12, 31)),
    ],
)
def test_parse_date(text, expected):
    assert parse_date(text) == expected


@pytest.mark.parametrize("day", [date(2023, 1, 1), date(2023, 6, 2), date(2024, 2, 29), date(2019, 11, 30)])
def test_parse_date_round_trips_day_month_year(day):
    text = f"{day.day}.{day.month}.{day.year}"
    parsed = parse_date(text)
    assert parsed == day
    assert parse_date(f"{parsed.day}.{parsed.month}.{parsed.year}") == day


@pytest.mark.parametrize("text", ["", "2023-06-01", "1.6.23", "31.2.2023", "1/6/2023", "le 1.6.2023"])
def test_parse_date_rejects_malformed_text(text):
    with pytest.raises(DateParseError) as excinfo:
        parse_date(text)
    assert excinfo.value.text == text.strip()


def test_date_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_date("bientôt")


@pytest.mark.parametrize("text", ["٧٠٠.٥ msm", "７００.５ msm"])
def test_parse_level_ignores_non_ascii_digits(text):
    assert parse_level(text) == 0.0


@pytest.mark.parametrize("text", ["١.٦.٢٠٢٣", "１.６.２０２３"])
def test_parse_date_rejects_non_ascii_digits(text):
    with pytest.raises(DateParseError):
        parse_date(text)
