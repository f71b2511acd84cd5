"""
Exceptions raised by the feed export pipeline.

Every failure in a run is fatal: the pipeline logs it and reports a failed
outcome, and the entry point exits with a non-zero status.
"""


class FeedExportError(Exception):
    """Base class for all feed export errors."""


class ConfigError(FeedExportError):
    """Required configuration is missing or malformed."""


class StoreConnectionError(FeedExportError):
    """The product store is unreachable, rejected auth, or timed out on connect/ping."""


class QueryError(FeedExportError):
    """The catalog query could not be issued or failed while scanning."""


class ReadTimeoutError(QueryError):
    """The catalog scan did not complete within its time budget."""


class DecodeError(FeedExportError):
    """A stored document does not have the expected catalog shape."""

    def __init__(self, message: str, document_id: str = ""):
        super().__init__(message)
        self.document_id = document_id


class EncodeError(FeedExportError):
    """The feed document could not be serialized."""


class PublishError(FeedExportError):
    """Archive or current feed file could not be read or written."""


class MarketplaceAPIError(FeedExportError):
    """The marketplace API answered with an unexpected status."""

    def __init__(self, message: str, status_code: int = 0, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
