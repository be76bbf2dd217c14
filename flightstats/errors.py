"""Exception hierarchy for ticket loading and analysis."""


class FlightStatsError(Exception):
    """Base class for every error raised by flightstats."""


class InputArgumentError(FlightStatsError):
    """Wrong command line arguments."""


class SourceLoadError(FlightStatsError):
    """The input file could not be read or does not hold a ticket collection."""


class MissingFieldError(FlightStatsError):
    """A ticket lacks one of the date/time fields needed for its duration."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"missing date or time fields: {', '.join(fields)}")


class DateTimeParseError(FlightStatsError):
    """A ticket date/time pair does not form a valid timestamp."""


class InvalidTimeFormat(FlightStatsError, ValueError):
    """Time string is not made of two 1-2 digit parts separated by ':'."""
