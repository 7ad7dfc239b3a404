"""
benchviz exceptions module.

Contains exception classes shared by the series, loader and view modules.
"""


class InvalidDateFormatError(ValueError):
    """Exception raised when a date string is not a valid DD-MM-YYYY date."""

    def __init__(self, text: object, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid date {text!r}: {reason}")


class UnknownColumnError(KeyError):
    """Exception raised when writing to a column the table never registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown column"


class FetchError(Exception):
    """Exception raised when a JSON file cannot be fetched or decoded.

    Attributes:
        path: Relative path of the file that was requested.
        status_code: HTTP status code, if the server answered at all.
    """

    def __init__(self, path: str, message: str, status_code: int | None = None) -> None:
        self.path = path
        self.status_code = status_code
        super().__init__(f"Failed to fetch {path}: {message}")
