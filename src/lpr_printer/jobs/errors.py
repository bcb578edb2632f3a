"""
Errors raised while turning an endpoint URI into a print job configuration.

Only the scheme, the URI structure and the copy count are strict;
every other parameter falls back to a default instead of raising.
"""


class PrinterUriError(ValueError):
    """Base class for URIs that cannot be turned into a configuration."""

    def __init__(self, message: str, uri: str = ''):
        super().__init__(message)
        self.uri = uri


class InvalidProtocolError(PrinterUriError):
    def __init__(self, scheme: str, uri: str):
        super().__init__(f"Unrecognized print protocol: {scheme!r} for uri: {uri}", uri)
        self.scheme = scheme


class MalformedCopiesError(PrinterUriError):
    def __init__(self, value: str, uri: str = ''):
        super().__init__(f"copies must be an integer between 1 and 2147483647, got {value!r} (uri: {uri})", uri)
        self.value = value


class MalformedUriError(PrinterUriError):
    def __init__(self, uri: str, reason: str):
        super().__init__(f"Malformed printer uri {uri!r}: {reason}", uri)
        self.reason = reason


class UnknownEndpointError(KeyError):
    """Raised when a named endpoint is not present in the config file."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"No endpoint named {self.name!r} in configuration"
