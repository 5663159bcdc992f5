"""Exception hierarchy for echoshim.

This module defines all custom exceptions used throughout the library,
following a hierarchical structure for granular error handling.
"""

from typing import List


class EchoShimError(Exception):
    """Base exception for all echoshim errors.

    Usage: Catch this to handle any library error.
    """


class ResponderError(EchoShimError):
    """Base exception for responder pipeline errors."""


class IoError(ResponderError):
    """Standard input could not be read or was not valid UTF-8 text."""


class ParseError(ResponderError):
    """Input was not valid JSON, or a recognized field had the wrong type.

    Attributes:
        field_name: Name of the offending field (if known)
    """

    def __init__(self, message: str, field_name: str | None = None) -> None:
        """Initialize ParseError with field name.

        Args:
            message: Error description
            field_name: Name of the field that failed type checking
        """
        super().__init__(message)
        self.field_name = field_name


class SerializeError(ResponderError):
    """The output record could not be serialized to JSON."""


class ProxyError(EchoShimError):
    """Base exception for proxy errors."""


class ResponderLaunchError(ProxyError):
    """Raised when the responder child process cannot be started.

    Attributes:
        command: The command line that failed to launch

    Example:
        >>> raise ResponderLaunchError(
        ...     "Responder executable not found: /missing/bin/cli",
        ...     command=['/missing/bin/cli']
        ... )
    """

    def __init__(self, message: str, command: List[str] | None = None) -> None:
        """Initialize ResponderLaunchError with the failing command.

        Args:
            message: Error description
            command: The command line that was attempted
        """
        super().__init__(message)
        self.command = command or []


class BodySizeError(ProxyError):
    """Raised when a request body exceeds the proxy size limit.

    Attributes:
        size_bytes: Size of the body in bytes
        max_bytes: Maximum allowed size in bytes
    """

    def __init__(
        self,
        message: str,
        size_bytes: int | None = None,
        max_bytes: int | None = None,
    ) -> None:
        """Initialize BodySizeError with details.

        Args:
            message: Error description
            size_bytes: Actual size in bytes
            max_bytes: Maximum allowed size in bytes
        """
        super().__init__(message)
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
