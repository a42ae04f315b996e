"""Object storage operations for Google Cloud Storage buckets."""

from .clients import GCSClientConfig, GCSClientManager
from .download import GCSBlobDownloader, download_blob
from .listing import GCSFolderLister, list_folder_contents
from .permissions import verify_bucket_access

__all__ = [
    "GCSBlobDownloader",
    "GCSClientConfig",
    "GCSClientManager",
    "GCSFolderLister",
    "download_blob",
    "list_folder_contents",
    "verify_bucket_access",
]
