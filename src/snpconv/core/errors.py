"""
Conversion errors.

Every failure aborts the whole conversion; no partial output is produced.
"""


class ConversionError(ValueError):
    """Base class for Touchstone conversion failures."""


class InputMissingError(ConversionError):
    """Raised when the input text is empty or absent."""

    def __init__(self, message: str = "No input data provided"):
        super().__init__(message)


class NoDataFoundError(ConversionError):
    """Raised when a scan yields zero data records."""

    def __init__(self, message: str = "No data points found in input"):
        super().__init__(message)


class IncompleteRecordError(ConversionError):
    """Raised when a record holds fewer than 2*N^2 values."""

    def __init__(self, frequency_token: str, expected: int, found: int):
        self.frequency_token = frequency_token
        self.expected = expected
        self.found = found
        super().__init__(
            f"Frequency {frequency_token} incomplete: "
            f"expected {expected} values, found {found}"
        )


class IncompleteForDetectionError(ConversionError):
    """Raised when auto ordering has no complete record to sample."""

    def __init__(
        self, message: str = "No complete record available for ordering detection"
    ):
        super().__init__(message)


class PortSelectionError(ConversionError):
    """Raised for an invalid port count or port index."""
