"""Google Cloud Storage plugin for data catalogs.

This package exposes one bucket as a virtual tree of folders and files to a
host catalog application, and downloads selected objects for ingestion.

Key Features:
    - Service account storage with masking in the configuration
    - Folder-by-folder listing with breadcrumb and name filtering
    - Streaming downloads with progress reporting
    - CLI interface

Recommended Usage:
    Register the plugin descriptor with the host:

    >>> from gcs_catalog import plugin
    >>> plugin.metadata["title"]
    'Catalog Google Cloud Storage'

Advanced Usage:
    Import the object storage layer directly:

    >>> from gcs_catalog.objectstorage import list_folder_contents
"""

__version__ = "0.1.0"

from .catalog import (
    CAPABILITIES,
    CONFIG_SCHEMA,
    CatalogPlugin,
    assert_config_valid,
    get_resource,
    list_resources,
    plugin,
    prepare,
)
from .progress import StructlogTaskLog, TaskLog
from .schemas import (
    MASKED_SECRET,
    CatalogSecrets,
    FetchedResource,
    FolderEntry,
    GCSCatalogConfig,
    GetResourceContext,
    ListingResult,
    ListParams,
    ListResourcesContext,
    PrepareContext,
    ResourceEntry,
)

__all__ = [
    # Plugin hooks
    "CatalogPlugin",
    "get_resource",
    "list_resources",
    "plugin",
    "prepare",
    # Static description
    "CAPABILITIES",
    "CONFIG_SCHEMA",
    "assert_config_valid",
    # Schemas
    "MASKED_SECRET",
    "CatalogSecrets",
    "FetchedResource",
    "FolderEntry",
    "GCSCatalogConfig",
    "GetResourceContext",
    "ListParams",
    "ListResourcesContext",
    "ListingResult",
    "PrepareContext",
    "ResourceEntry",
    # Progress reporting
    "StructlogTaskLog",
    "TaskLog",
]
