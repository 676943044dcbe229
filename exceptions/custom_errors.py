class InvalidDateRangeError(Exception):
    """Raised when a scheduling range is malformed, e.g. a non-positive number of days or an invalid month."""

    pass


class MissingIdentifierError(Exception):
    """Raised when an input record (employee, preference) is missing its required identifier."""

    pass


class UnknownShiftCodeError(Exception):
    """Raised when a shift code in the input is not part of the shift catalog."""

    pass


class InputMismatchError(Exception):
    """Raised when there is a mismatch between the employee list and the preferences."""

    pass


class GenerationCancelledError(Exception):
    """Raised when a schedule generation run is cancelled by the caller."""


class FileContentError(Exception):
    """Raised when the content of a file is not as expected."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    InvalidDateRangeError: 400,
    MissingIdentifierError: 400,
    UnknownShiftCodeError: 400,
    InputMismatchError: 400,
    GenerationCancelledError: 409,
    FileContentError: 500,
}
