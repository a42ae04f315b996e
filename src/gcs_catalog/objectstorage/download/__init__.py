"""Object download operations."""

from .blob_download import GCSBlobDownloader, download_blob

__all__ = ["GCSBlobDownloader", "download_blob"]
