"""Row error kind enumeration."""

from enum import Enum


class RowErrorKind(str, Enum):
    """Reason a raw input row was rejected."""

    MALFORMED_ROW = "MalformedRow"
    INVALID_TIMESTAMP = "InvalidTimestamp"
    INVALID_NUMERIC_FIELD = "InvalidNumericField"
    OUT_OF_RANGE_VALUE = "OutOfRangeValue"
    UNEXPECTED_PARSE_FAILURE = "UnexpectedParseFailure"
