"""Error types shared by the upstream clients and the catalog."""


class ConfigurationError(ValueError):
    """A required credential or setting is missing."""


class UpstreamUnavailable(Exception):
    """An upstream provider call failed (non-2xx response or network error).

    Attributes:
        provider: Provider tag value, e.g. "cfbd" or "espn".
        status: HTTP status returned by the provider, or None for transport
            failures where no response was received.
        message: Provider response text or the transport error description.
    """

    def __init__(self, provider: str, status: int | None, message: str) -> None:
        self.provider = provider
        self.status = status
        self.message = message
        super().__init__(f"{provider} request failed ({status or 'no response'}): {message}")


class MalformedField(ValueError):
    """A single upstream field could not be parsed."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Cannot parse {field}={value!r}")


class NotFound(LookupError):
    """A named lookup (team by name, player by id) produced no match."""
