from __future__ import annotations


class FetchError(Exception):
    """A single request could not produce usable data."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class TransportError(FetchError):
    """Network error, timeout, bad status, or a body that is not JSON."""


class UpstreamRejected(FetchError):
    """The API answered, but with a 404, `success: false`, or empty `data`."""


class CandidatesExhausted(Exception):
    """Every candidate in a fallback chain failed."""

    def __init__(self, failures: list[FetchError]) -> None:
        super().__init__(f"all {len(failures)} candidates failed")
        self.failures = failures

    @property
    def all_transport(self) -> bool:
        return all(isinstance(f, TransportError) for f in self.failures)


class NotFound(Exception):
    """The resource is absent from every data source."""


class TransportFailure(Exception):
    """The resource could not be loaded from any data source."""
