"""Listing of one bucket level as catalog folders and resources.

GCS has no directories: a "folder" is a common prefix returned when listing
with the ``/`` delimiter. For example, with objects:
- data/2023/file1.csv
- data/report.pdf

Listing ``data/`` yields the resource ``data/report.pdf`` and the folder
``data/2023/``.
"""

import posixpath
from typing import Optional

from gcs_catalog.core import get_logger, get_tracer
from gcs_catalog.core.exceptions import ListingFailedError
from gcs_catalog.objectstorage.clients import GCSClientConfig, GCSClientManager
from gcs_catalog.schemas import FolderEntry, ListingResult, ResourceEntry

logger = get_logger(__name__)
tracer = get_tracer(__name__)

DELIMITER = "/"


def build_match_glob(current_folder_id: str, q: Optional[str]) -> Optional[str]:
    """Build the glob restricting a listing to names containing ``q``.

    The pattern is anchored at the current folder and kept to one level by the
    delimiter. Wildcards are asymmetric (``*`` before, ``**`` after).
    """
    if not q:
        return None
    return f"{current_folder_id}*{q}**"


def build_breadcrumb(current_folder_id: str) -> list[FolderEntry]:
    """Build the folder path from the bucket root to ``current_folder_id``."""
    segments = [segment for segment in current_folder_id.split(DELIMITER) if segment]
    return [
        FolderEntry(
            id=DELIMITER.join(segments[: idx + 1]) + DELIMITER,
            title=segment,
        )
        for idx, segment in enumerate(segments)
    ]


def blob_to_resource(blob) -> ResourceEntry:
    """Convert a listed blob into a resource entry."""
    return ResourceEntry(
        id=blob.name,
        title=posixpath.basename(blob.name),
        size=blob.size,
        format=posixpath.splitext(blob.name)[1][1:],
        mime_type=blob.content_type,
    )


def prefix_to_folder(prefix: str) -> FolderEntry:
    """Convert a common prefix such as ``a/b/`` into a folder entry ``b``."""
    name = prefix[:-1]
    return FolderEntry(id=prefix, title=name[name.rfind(DELIMITER) + 1 :])


class GCSFolderLister:
    """Lists files and sub-folders of one level of a bucket."""

    def __init__(self, bucket_name: str, config: GCSClientConfig):
        """Initialize GCS folder lister.

        Args:
            bucket_name: GCS bucket name
            config: GCS client configuration
        """
        self.bucket_name = bucket_name
        self.client_manager = GCSClientManager(config)

    def list_folder(
        self, current_folder_id: str = "", q: Optional[str] = None
    ) -> ListingResult:
        """List objects and common prefixes directly under a folder.

        Args:
            current_folder_id: Folder prefix ending with ``/``, empty for the root
            q: Optional substring filter on names of this level

        Returns:
            Files first, then folders, with the breadcrumb of the folder

        Raises:
            ListingFailedError: If any storage or credential error occurs
        """
        logger.info(
            "Listing GCS folder",
            bucket=self.bucket_name,
            prefix=current_folder_id,
            q=q,
        )

        with tracer.start_as_current_span("gcs_catalog.list_folder"):
            try:
                iterator = self.client_manager.client.list_blobs(
                    self.bucket_name,
                    prefix=current_folder_id,
                    delimiter=DELIMITER,
                    match_glob=build_match_glob(current_folder_id, q),
                    include_trailing_delimiter=False,
                )
                # Prefixes are only known once every page has been read
                blobs = list(iterator)
                prefixes = sorted(iterator.prefixes)
            except Exception as e:
                logger.error(
                    "Error listing resources",
                    bucket=self.bucket_name,
                    prefix=current_folder_id,
                    error=str(e),
                    exc_info=True,
                )
                raise ListingFailedError() from e

        files = [
            blob_to_resource(blob) for blob in blobs if blob.name != current_folder_id
        ]
        folders = [
            prefix_to_folder(prefix) for prefix in prefixes if prefix != DELIMITER
        ]

        logger.info(
            "GCS folder listed",
            bucket=self.bucket_name,
            prefix=current_folder_id,
            file_count=len(files),
            folder_count=len(folders),
        )
        return ListingResult(
            count=len(files) + len(folders),
            results=[*files, *folders],
            path=build_breadcrumb(current_folder_id),
        )


def list_folder_contents(
    bucket_name: str,
    service_account: str,
    current_folder_id: Optional[str] = None,
    q: Optional[str] = None,
) -> ListingResult:
    """Convenience function to list one level of a bucket.

    Args:
        bucket_name: GCS bucket name
        service_account: Service account credential JSON
        current_folder_id: Folder prefix, ``None`` or empty for the root
        q: Optional substring filter

    Returns:
        Listing of the folder
    """
    lister = GCSFolderLister(
        bucket_name, GCSClientConfig(service_account=service_account)
    )
    return lister.list_folder(current_folder_id or "", q)
