"""Exception classes for rtfhtml.

Provides standardized exceptions for error handling throughout rtfhtml.
"""

from __future__ import annotations


class RtfHtmlError(Exception):
    """Base exception for all rtfhtml errors.

    Subclass this for specific error categories.
    """

    pass


class MissingInputError(RtfHtmlError):
    """No source text, chunk sequence or file path was provided.

    Raised before any parsing begins.
    """

    pass


class MalformedContentError(RtfHtmlError):
    """A content-begin marker has no matching content-end marker.

    Non-fatal by default: the parse loop stops on this error and returns
    the fragment accumulated so far.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize malformed content error with optional location.

        Args:
            message: Error description
            offset: Offset of the content start within the residual chunk
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if offset is not None:
            location += f"{offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ConfigError(RtfHtmlError):
    """Invalid converter configuration value."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
