"""Custom exceptions for the chatquery adapters."""


class QueryError(Exception):
    """Base exception for chatquery."""

    pass


class ConfigurationError(QueryError):
    """Exception raised when a required setting is missing."""

    def __init__(self, setting: str, message: str = ""):
        self.setting = setting
        super().__init__(message or f"{setting} is not configured")


class TransportError(QueryError):
    """Exception raised for network/HTTP failures reaching a provider."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class DecodeError(QueryError):
    """Exception raised when a provider body does not parse as expected."""

    pass


class ProviderReportedError(QueryError):
    """Exception raised when a provider flags an application-level error."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class PlaceNotFoundError(ProviderReportedError):
    """Geocoding returned zero matches for a query."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Unable to find {query}")


class InvalidQueryError(QueryError):
    """Exception raised for input an adapter cannot use."""

    pass


class UnknownCommandError(QueryError):
    """Exception raised for a chat command with no adapter."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown command: {command}")
