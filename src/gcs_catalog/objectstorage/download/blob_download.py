"""Streaming download of one object into a local directory.

The object is copied chunk by chunk: a chunk is read only once the previous
one has been written and reported, so memory use is bounded by the chunk
size whatever the object size or network speed.
"""

import os
import posixpath
from typing import Optional

from gcs_catalog.progress import TaskLog
from gcs_catalog.core import get_logger, get_tracer, settings
from gcs_catalog.core.exceptions import DownloadFailedError
from gcs_catalog.objectstorage.clients import GCSClientConfig, GCSClientManager
from gcs_catalog.schemas import FetchedResource

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class GCSBlobDownloader:
    """Downloads bucket objects to local files with progress reporting."""

    def __init__(
        self,
        bucket_name: str,
        config: GCSClientConfig,
        chunk_size: Optional[int] = None,
    ):
        """Initialize GCS blob downloader.

        Args:
            bucket_name: GCS bucket name
            config: GCS client configuration
            chunk_size: Read size in bytes, defaults to settings.download_chunk_size
        """
        self.bucket_name = bucket_name
        self.client_manager = GCSClientManager(config)
        self.chunk_size = chunk_size or settings.download_chunk_size

    def download(self, resource_id: str, tmp_dir: str, log: TaskLog) -> FetchedResource:
        """Download one object into ``tmp_dir``.

        Args:
            resource_id: Full object name in the bucket
            tmp_dir: Directory receiving the file, owned by the caller
            log: Progress sink receiving step, task, progress and error events

        Returns:
            The downloaded resource with its local path

        Raises:
            DownloadFailedError: If metadata, streaming or progress reporting fails
        """
        file_name = resource_id[resource_id.rfind("/") + 1 :]
        file_path = os.path.join(tmp_dir, file_name)
        task_name = f"download {resource_id}"

        logger.info(
            "Downloading GCS object",
            bucket=self.bucket_name,
            resource_id=resource_id,
            file_path=file_path,
        )

        stream_error_reported = False
        with tracer.start_as_current_span("gcs_catalog.download_blob"):
            try:
                log.step(f"Téléchargement du fichier : {file_name}")

                blob = self.client_manager.client.bucket(self.bucket_name).blob(
                    resource_id
                )
                blob.reload()
                log.task(task_name, "Progression", _parse_size(blob.size))

                try:
                    written = self._copy(blob, file_path, task_name, log)
                except Exception as e:
                    stream_error_reported = True
                    log.error(f"Error during download: {e}")
                    raise
            except Exception as e:
                logger.error(
                    "Error getting resource",
                    bucket=self.bucket_name,
                    resource_id=resource_id,
                    error=str(e),
                    exc_info=True,
                )
                if not stream_error_reported:
                    self._report_failure(log, e)
                raise DownloadFailedError() from e

        logger.info(
            "GCS object downloaded",
            resource_id=resource_id,
            file_path=file_path,
            bytes_written=written,
        )
        stem, extension = posixpath.splitext(file_name)
        return FetchedResource(
            id=resource_id,
            title=stem,
            file_path=file_path,
            format=extension[1:],
        )

    def _report_failure(self, log: TaskLog, error: Exception) -> None:
        """Tell the host why the download stopped before streaming."""
        try:
            log.error(f"Error during file download: {error}")
        except Exception as e:
            logger.warning("Task log rejected error notification", error=str(e))

    def _copy(self, blob, file_path: str, task_name: str, log: TaskLog) -> int:
        """Pipe the object stream into ``file_path``, reporting cumulative bytes."""
        progress = 0
        with blob.open("rb", chunk_size=self.chunk_size) as reader, open(
            file_path, "wb"
        ) as writer:
            while True:
                chunk = reader.read(self.chunk_size)
                if not chunk:
                    break
                writer.write(chunk)
                progress += len(chunk)
                log.progress(task_name, progress)
        return progress


def _parse_size(size) -> Optional[int]:
    """Return the object size in bytes, or None when unknown."""
    try:
        return int(size)
    except (TypeError, ValueError):
        return None


def download_blob(
    bucket_name: str,
    service_account: str,
    resource_id: str,
    tmp_dir: str,
    log: TaskLog,
) -> FetchedResource:
    """Convenience function to download one object.

    Args:
        bucket_name: GCS bucket name
        service_account: Service account credential JSON
        resource_id: Full object name in the bucket
        tmp_dir: Destination directory
        log: Progress sink

    Returns:
        The downloaded resource
    """
    downloader = GCSBlobDownloader(
        bucket_name, GCSClientConfig(service_account=service_account)
    )
    return downloader.download(resource_id, tmp_dir, log)
