"""
Feed Publisher

Writes each generated feed to a timestamped archive file and replaces
the "current" feed (the file Zoom fetches) only when its bytes changed,
so an unchanged catalog does not re-trigger Zoom's ingestion.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..common.constants import ARCHIVE_TIMESTAMP_FORMAT
from ..common.settings import FeedSettings
from ..errors import PublishError

logger = logging.getLogger(__name__)

CURRENT_FILE_MODE = 0o644


@dataclass(frozen=True)
class PublishResult:
    """What a publish call did."""
    archive_path: Path
    current_path: Path
    updated: bool              # current file rewritten
    previous_existed: bool


class FeedPublisher:
    """
    Publishes serialized feeds into the output directory.

    Usage:
        publisher = FeedPublisher(output_dir, feed_name="zoom-produtos")
        result = publisher.publish(content)
        if not result.updated:
            ...  # Zoom already has this catalog
    """

    def __init__(
        self,
        output_dir: Path,
        feed_name: str = "zoom-produtos",
        current_filename: str = "zoom-produtos.xml",
    ):
        """
        Initialize the publisher.

        Args:
            output_dir: Directory holding the current feed and archives
            feed_name: Base name for archive files
            current_filename: File name of the published feed
        """
        self.output_dir = Path(output_dir)
        self.feed_name = feed_name
        self.current_path = self.output_dir / current_filename

    @classmethod
    def from_settings(cls, settings: FeedSettings) -> "FeedPublisher":
        return cls(
            settings.output_dir,
            feed_name=settings.feed_name,
            current_filename=settings.current_filename,
        )

    def archive_path(self, generated_at: datetime) -> Path:
        stamp = generated_at.strftime(ARCHIVE_TIMESTAMP_FORMAT)
        return self.output_dir / f"{self.feed_name}-{stamp}.xml"

    def _read_current(self) -> Optional[bytes]:
        """Bytes of the current feed, or None if it was never published."""
        try:
            return self.current_path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PublishError(f"Could not read {self.current_path}: {e}") from e

    def _write(self, path: Path, content: bytes) -> None:
        try:
            path.write_bytes(content)
        except OSError as e:
            raise PublishError(f"Could not write {path}: {e}") from e

    def _replace_current(self, content: bytes) -> None:
        """Swap in the new current feed atomically; Zoom never sees a half-written file."""
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.current_path.name}.", suffix=".tmp", dir=self.output_dir
            )
        except OSError as e:
            raise PublishError(f"Could not write {self.current_path}: {e}") from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            # mkstemp creates 0600; the site serves this file
            os.chmod(tmp_name, CURRENT_FILE_MODE)
            os.replace(tmp_name, self.current_path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise PublishError(f"Could not write {self.current_path}: {e}") from e

    def publish(self, content: bytes, generated_at: Optional[datetime] = None) -> PublishResult:
        """
        Archive the feed and update the current file if it changed.

        Args:
            content: Serialized feed
            generated_at: Generation time used for the archive name (default: now)

        Returns:
            PublishResult

        Raises:
            PublishError: On any filesystem failure
        """
        if generated_at is None:
            generated_at = datetime.now()

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PublishError(f"Could not create {self.output_dir}: {e}") from e

        archive_path = self.archive_path(generated_at)
        logger.info("Saving XML file %s ...", archive_path)
        self._write(archive_path, content)

        previous = self._read_current()
        if previous is None:
            logger.info("No published feed at %s yet", self.current_path)
        elif previous == content:
            logger.info("XML not changed, keeping %s", self.current_path)
            return PublishResult(archive_path, self.current_path, updated=False, previous_existed=True)

        logger.info("Saving XML file %s ...", self.current_path)
        self._replace_current(content)
        return PublishResult(
            archive_path,
            self.current_path,
            updated=True,
            previous_existed=previous is not None,
        )
