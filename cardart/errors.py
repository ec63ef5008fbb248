"""
Ingestion failure taxonomy.

Every failure the update job can raise derives from IngestError, so the
job entry point can log one exception type and exit non-zero.

Propagation:
- FetchFailure subclasses are retried by the fetcher, then raised.
- Cache read and write problems never surface as exceptions.
- Everything else aborts the run.
"""


class IngestError(Exception):
    """Base class for card data ingestion failures."""

    pass


class FetchFailure(IngestError):
    """An HTTP request did not produce a successful response."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Request to {url} failed: {message}")
        self.url = url


class TransportFailure(FetchFailure):
    """Connection, timeout or other transport-level failure."""

    pass


class UpstreamStatusFailure(FetchFailure):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(url, f"HTTP {status_code}")
        self.status_code = status_code


class DecodeFailure(IngestError):
    """Payload could not be decoded as (gzipped) JSON of the expected shape."""

    pass


class MissingDatasetFailure(IngestError):
    """The requested bulk dataset type is absent from the discovery response."""

    def __init__(self, dataset_type: str) -> None:
        super().__init__(f"Bulk data of type {dataset_type!r} not found")
        self.dataset_type = dataset_type


class PersistenceFailure(IngestError):
    """Writing an output artifact failed."""

    def __init__(self, path: object, message: str) -> None:
        super().__init__(f"Failed to write {path}: {message}")
        self.path = path
