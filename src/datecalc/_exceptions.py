class DateCalcError(ValueError):
    """Base exception for all datecalc errors."""


class InvalidDateError(DateCalcError):
    """A value could not be interpreted as a calendar date."""


class InvalidArgumentError(DateCalcError):
    """An integer argument (month, work/off count, ...) is out of range."""


class SearchLimitError(DateCalcError):
    """A bounded calendar search ran out of candidates."""
