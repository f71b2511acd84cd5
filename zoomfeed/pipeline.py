"""
Feed Export Pipeline

One run, start to finish:

    connect -> read catalog -> derive -> serialize -> publish -> disconnect

Any failure stops the run. The pipeline never exits the process; it
returns a PipelineOutcome and the caller decides the exit status.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .catalog import CatalogReader, connect_store
from .common.settings import FeedSettings
from .errors import FeedExportError
from .feed import FeedPublisher, FeedSerializer, FieldDeriver, PublishResult

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    READING = "reading"
    DERIVING = "deriving"
    SERIALIZING = "serializing"
    PUBLISHING = "publishing"
    DISCONNECTING = "disconnecting"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineOutcome:
    """Result of a pipeline run."""
    state: PipelineState
    error: Optional[FeedExportError] = None
    failed_in: Optional[PipelineState] = None
    record_count: int = 0
    publish_result: Optional[PublishResult] = None
    elapsed_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DONE


class FeedPipeline:
    """
    Runs the Zoom feed export once.

    Usage:
        pipeline = FeedPipeline(settings)
        outcome = pipeline.run()
        if not outcome.succeeded:
            sys.exit(1)
    """

    def __init__(
        self,
        settings: FeedSettings,
        client_factory: Callable[..., MongoClient] = MongoClient,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the pipeline.

        Args:
            settings: Run settings
            client_factory: MongoClient or a stand-in with the same signature
            clock: Source of the generation time used in archive names
        """
        self.settings = settings
        self.client_factory = client_factory
        self.clock = clock

        self.deriver = FieldDeriver.from_settings(settings)
        self.serializer = FeedSerializer()
        self.publisher = FeedPublisher.from_settings(settings)

        self.state = PipelineState.DISCONNECTED
        self.history: List[PipelineState] = [self.state]

    def _enter(self, state: PipelineState) -> None:
        logger.debug("Pipeline %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def _disconnect(self, client: MongoClient) -> None:
        """Close the store client; failing to do so never fails the run."""
        try:
            client.close()
        except PyMongoError as e:
            logger.warning("Error while disconnecting from MongoDB: %s", e)

    def run(self) -> PipelineOutcome:
        """
        Execute the run.

        Returns:
            PipelineOutcome with state DONE, or FAILED and the error
        """
        started = time.monotonic()
        outcome = PipelineOutcome(state=self.state)
        client: Optional[MongoClient] = None

        try:
            self._enter(PipelineState.CONNECTING)
            client = connect_store(self.settings, self.client_factory)
            self._enter(PipelineState.CONNECTED)

            self._enter(PipelineState.READING)
            records = CatalogReader.from_client(client, self.settings).read()
            outcome.record_count = len(records)
            logger.info("%d products to be commercialized.", len(records))

            self._enter(PipelineState.DERIVING)
            feed_records = self.deriver.derive_all(records)

            self._enter(PipelineState.SERIALIZING)
            content = self.serializer.serialize(feed_records)

            self._enter(PipelineState.PUBLISHING)
            outcome.publish_result = self.publisher.publish(content, self.clock())

            self._enter(PipelineState.DISCONNECTING)
            self._disconnect(client)
            client = None
            self._enter(PipelineState.DONE)

        except FeedExportError as e:
            outcome.failed_in = self.state
            outcome.error = e
            logger.error("Feed export failed while %s: %s", self.state.value, e)
            self._enter(PipelineState.FAILED)

        finally:
            if client is not None:
                self._disconnect(client)

        outcome.state = self.state
        outcome.elapsed_seconds = time.monotonic() - started
        logger.info("Time to process %.0fms", outcome.elapsed_seconds * 1000)
        return outcome
