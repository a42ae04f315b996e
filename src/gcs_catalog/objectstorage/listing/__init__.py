"""Bucket folder listing operations."""

from .folder_contents import (
    GCSFolderLister,
    build_breadcrumb,
    build_match_glob,
    list_folder_contents,
)

__all__ = [
    "GCSFolderLister",
    "build_breadcrumb",
    "build_match_glob",
    "list_folder_contents",
]
