"""
Wikimedia Pageviews API – parameter validation.

Checks a caller's parameter mapping before any request is built. Rules run
in a fixed order and stop at the first failure, so the error message always
names the first broken rule:

    project -> article -> start/end -> year/month/day/limit -> access/agent/granularity
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pageviews.config import (
    ACCESS_ALLOWED,
    AGENT_ALLOWED,
    GRANULARITY_ALLOWED,
    LIMIT_MAX,
)
from pageviews.errors import InvalidParameterError

# YYYYMMDD, optionally split by one separator used throughout (-, / or .)
DATE_PATTERN = re.compile(
    r"(?:19|20)\d\d([-/.]?)(?:0[1-9]|1[012])\1(?:0[1-9]|[12]\d|3[01])"
)
# YYYYMMDDHH, same separator rules
HOURLY_PATTERN = re.compile(
    r"(?:19|20)\d\d([-/.]?)(?:0[1-9]|1[012])\1(?:0[1-9]|[12]\d|3[01])\1[012]\d"
)
YEAR_PATTERN = re.compile(r"(?:19|20)\d\d")
MONTH_PATTERN = re.compile(r"0[1-9]|1[012]")
# Digit pattern only, no calendar check: 31 passes for every month
DAY_PATTERN = re.compile(r"0[1-9]|[12]\d|3[01]")
LIMIT_PATTERN = re.compile(r"\d+")

OPTIONAL_ALLOWED = (
    ("access", ACCESS_ALLOWED),
    ("agent", AGENT_ALLOWED),
    ("granularity", GRANULARITY_ALLOWED),
)


class Operation(str, Enum):
    """The four API operations; each has its own validation rules."""

    DIMENSIONS = "dimensions"
    PER_ARTICLE = "per-article"
    AGGREGATE = "aggregate"
    TOP = "top"


@dataclass(frozen=True)
class Valid:
    params: Mapping[str, Any]


@dataclass(frozen=True)
class Invalid:
    error: InvalidParameterError


ValidationResult = Valid | Invalid


def _matches(pattern: re.Pattern, value: Any) -> bool:
    return bool(value) and pattern.fullmatch(str(value)) is not None


def _required(field: str) -> Invalid:
    return Invalid(
        InvalidParameterError(f'Required parameter "{field}" missing or invalid.', field)
    )


def _optional(field: str) -> Invalid:
    return Invalid(InvalidParameterError(f'Invalid optional parameter "{field}".', field))


def is_valid_limit(limit: Any) -> bool:
    """True for an integer (or digit string) in 1..LIMIT_MAX."""
    if isinstance(limit, bool):
        return False
    if isinstance(limit, int):
        return 0 < limit <= LIMIT_MAX
    if isinstance(limit, str) and LIMIT_PATTERN.fullmatch(limit):
        return 0 < int(limit) <= LIMIT_MAX
    return False


def validate_params(
    params: Mapping[str, Any] | None,
    operation: Operation,
    strict_limit: bool = False,
) -> ValidationResult:
    """
    Validate the parameters of one call.

    Args:
        params: Caller-supplied parameter mapping (None if absent)
        operation: Which API operation the parameters are for
        strict_limit: Reject a top-articles limit outside 1..1000. When False
            the limit is never rejected.

    Returns:
        Valid wrapping the same mapping, or Invalid with the first failing rule.
    """
    if operation is Operation.DIMENSIONS:
        return Valid(params or {})

    if params is None:
        return Invalid(InvalidParameterError("Required parameters missing."))

    project = params.get("project")
    if not project or "." not in str(project):
        return _required("project")

    if operation is Operation.PER_ARTICLE:
        if not params.get("article"):
            return Invalid(
                InvalidParameterError('Required parameter "article" missing.', "article")
            )
        for field in ("start", "end"):
            if not _matches(DATE_PATTERN, params.get(field)):
                return _required(field)

    elif operation is Operation.AGGREGATE:
        for field in ("start", "end"):
            if not _matches(HOURLY_PATTERN, params.get(field)):
                return _required(field)

    elif operation is Operation.TOP:
        for field, pattern in (
            ("year", YEAR_PATTERN),
            ("month", MONTH_PATTERN),
            ("day", DAY_PATTERN),
        ):
            if not _matches(pattern, params.get(field)):
                return _required(field)
        limit = params.get("limit")
        if strict_limit and limit and not is_valid_limit(limit):
            return _optional("limit")

    for field, allowed in OPTIONAL_ALLOWED:
        value = params.get(field)
        if value and value not in allowed:
            return _optional(field)

    return Valid(params)


def check_params(
    params: Mapping[str, Any] | None,
    operation: Operation,
    strict_limit: bool = False,
) -> Mapping[str, Any]:
    """Return the validated parameters or raise InvalidParameterError."""
    result = validate_params(params, operation, strict_limit=strict_limit)
    if isinstance(result, Invalid):
        raise result.error
    return result.params
