"""Tests for parameter validation: required fields, patterns, allow-lists, rule order."""

import pytest

from pageviews.errors import InvalidParameterError
from pageviews.validation import Invalid, Operation, Valid, check_params, validate_params

PER_ARTICLE = {
    "project": "en.wikipedia",
    "article": "Albert Einstein",
    "start": "20240101",
    "end": "20240131",
}
AGGREGATE = {"project": "en.wikipedia", "start": "2024010100", "end": "2024013100"}
TOP = {"project": "en.wikipedia", "year": "2024", "month": "01", "day": "15"}


def message(result) -> str:
    assert isinstance(result, Invalid)
    return str(result.error)


def test_valid_result_returns_same_mapping():
    result = validate_params(PER_ARTICLE, Operation.PER_ARTICLE)
    assert isinstance(result, Valid)
    assert result.params is PER_ARTICLE


def test_missing_params():
    result = validate_params(None, Operation.TOP)
    assert message(result) == "Required parameters missing."
    assert result.error.field is None


def test_dimensions_needs_no_params():
    assert isinstance(validate_params(None, Operation.DIMENSIONS), Valid)


@pytest.mark.parametrize("operation", [Operation.PER_ARTICLE, Operation.AGGREGATE, Operation.TOP])
@pytest.mark.parametrize("project", [None, "", "enwikipedia"])
def test_project_required_with_dot(operation, project):
    params = {**PER_ARTICLE, **AGGREGATE, **TOP, "project": project}
    result = validate_params(params, operation)
    assert message(result) == 'Required parameter "project" missing or invalid.'
    assert result.error.field == "project"


def test_empty_mapping_fails_on_project():
    assert message(validate_params({}, Operation.AGGREGATE)).startswith(
        'Required parameter "project"'
    )


def test_article_required():
    params = {**PER_ARTICLE, "article": ""}
    assert message(validate_params(params, Operation.PER_ARTICLE)) == (
        'Required parameter "article" missing.'
    )


@pytest.mark.parametrize("value", ["20240115", "2024-01-15", "2024/01/15", "2024.01.15", "19991231"])
def test_daily_dates_accepted(value):
    params = {**PER_ARTICLE, "start": value, "end": value}
    assert isinstance(validate_params(params, Operation.PER_ARTICLE), Valid)


@pytest.mark.parametrize(
    "value",
    ["2024-13-01", "20240132", "18990101", "21000101", "2024-01/15", "240115", "2024011500", "abc"],
)
def test_daily_dates_rejected(value):
    params = {**PER_ARTICLE, "start": value}
    assert message(validate_params(params, Operation.PER_ARTICLE)) == (
        'Required parameter "start" missing or invalid.'
    )


def test_end_checked_after_start():
    params = {**PER_ARTICLE, "end": "2024-13-01"}
    assert validate_params(params, Operation.PER_ARTICLE).error.field == "end"


def test_aggregate_requires_hour():
    params = {**AGGREGATE, "start": "20240101"}
    assert validate_params(params, Operation.AGGREGATE).error.field == "start"
    params = {**AGGREGATE, "end": "2024-01-31"}
    assert validate_params(params, Operation.AGGREGATE).error.field == "end"


@pytest.mark.parametrize("value", ["2024010100", "2024-01-01-23", "2024.01.01.00"])
def test_aggregate_hourly_accepted(value):
    params = {**AGGREGATE, "start": value, "end": value}
    assert isinstance(validate_params(params, Operation.AGGREGATE), Valid)


def test_top_fields_in_order():
    assert validate_params({**TOP, "year": "1899"}, Operation.TOP).error.field == "year"
    assert validate_params({**TOP, "month": "13"}, Operation.TOP).error.field == "month"
    assert validate_params({**TOP, "month": "1"}, Operation.TOP).error.field == "month"
    assert validate_params({**TOP, "day": "32"}, Operation.TOP).error.field == "day"
    assert validate_params({**TOP, "day": None}, Operation.TOP).error.field == "day"


@pytest.mark.parametrize("month", ["02", "04", "06", "09", "11"])
def test_day_31_accepted_for_every_month(month):
    assert isinstance(validate_params({**TOP, "month": month, "day": "31"}, Operation.TOP), Valid)


def test_top_accepts_int_year():
    assert isinstance(validate_params({**TOP, "year": 2024}, Operation.TOP), Valid)


@pytest.mark.parametrize("limit", ["5000", "0", "-3", "abc", 10])
def test_limit_never_rejected_by_default(limit):
    assert isinstance(validate_params({**TOP, "limit": limit}, Operation.TOP), Valid)


@pytest.mark.parametrize("limit", ["5000", "abc", 1001, "-3", True])
def test_strict_limit_rejects_out_of_range(limit):
    result = validate_params({**TOP, "limit": limit}, Operation.TOP, strict_limit=True)
    assert message(result) == 'Invalid optional parameter "limit".'


@pytest.mark.parametrize("limit", ["1", "1000", 25])
def test_strict_limit_accepts_range(limit):
    result = validate_params({**TOP, "limit": limit}, Operation.TOP, strict_limit=True)
    assert isinstance(result, Valid)


@pytest.mark.parametrize(
    "field,value",
    [("access", "tablet"), ("agent", "robot"), ("granularity", "hourly")],
)
def test_optional_allow_lists(field, value):
    result = validate_params({**PER_ARTICLE, field: value}, Operation.PER_ARTICLE)
    assert message(result) == f'Invalid optional parameter "{field}".'


def test_optional_allowed_values_and_empty_defaults():
    params = {**PER_ARTICLE, "access": "mobile-app", "agent": "", "granularity": "daily"}
    assert isinstance(validate_params(params, Operation.PER_ARTICLE), Valid)


def test_required_fields_checked_before_optional():
    params = {**PER_ARTICLE, "start": "bad", "access": "tablet"}
    assert validate_params(params, Operation.PER_ARTICLE).error.field == "start"


def test_check_params_raises():
    with pytest.raises(InvalidParameterError, match='"project"'):
        check_params({"project": "nodot"}, Operation.TOP)
    assert check_params(TOP, Operation.TOP) is TOP
