"""Exception types raised by the configuration utilities."""


class ConfigurationError(Exception):
    """Base type for all configuration related failures."""


class ConfigurationRuntimeError(ConfigurationError):
    """Raised when a reported or unexpected error is escalated to the caller.

    The triggering exception, if any, is kept in ``cause`` and is also chained
    as ``__cause__`` by the code raising this error.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        """Initialize the error with a message and an optional cause."""
        super().__init__(message)
        self.cause = cause


class MalformedURLError(ConfigurationError, ValueError):
    """Raised when a base path and file name cannot be combined into a URL."""
