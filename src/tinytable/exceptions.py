"""Exceptions for tinytable."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TinyTableError(Exception):
    """
    Base exception for all tinytable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(TinyTableError, ValueError):
    """
    Raised when a render call is given unusable input.

    Covers a missing or ``None`` grid, a grid without any rows or columns,
    and glyphs that are not strings. Raised before any width computation.

    Attributes:
        option: Name of the offending option (e.g. "rows", "corner_marker")
    """

    def __init__(self, message: str, *, option: str | None = None) -> None:
        self.option = option
        super().__init__(self._format_message(message))

    def _format_message(self, message: str) -> str:
        if self.option:
            return f"{message} [option={self.option}]"
        return message
