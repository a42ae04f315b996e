"""Host-facing hooks of the Google Cloud Storage catalog plugin."""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from gcs_catalog.core import get_logger, get_tracer
from gcs_catalog.core.exceptions import UnauthenticatedError
from gcs_catalog.objectstorage.download import download_blob
from gcs_catalog.objectstorage.listing import list_folder_contents
from gcs_catalog.schemas import (
    CatalogSecrets,
    FetchedResource,
    GCSCatalogConfig,
    GetResourceContext,
    ListingResult,
    ListResourcesContext,
    PrepareContext,
)

from .metadata import CONFIG_SCHEMA, METADATA, assert_config_valid
from .prepare import prepare

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def _require_service_account(secrets: CatalogSecrets) -> str:
    if not secrets.service_account:
        logger.warning("GCS operation attempted without service account")
        raise UnauthenticatedError()
    return secrets.service_account


def list_resources(context: ListResourcesContext) -> ListingResult:
    """List files and folders of the folder given in ``context.params``.

    Raises:
        UnauthenticatedError: If no service account secret is stored
        ListingFailedError: If the bucket cannot be listed
    """
    service_account = _require_service_account(context.secrets)
    params = context.params
    if not params.current_folder_id:
        params.current_folder_id = ""

    with tracer.start_as_current_span("gcs_catalog.list_resources"):
        return list_folder_contents(
            bucket_name=context.catalog_config.bucket_name,
            service_account=service_account,
            current_folder_id=params.current_folder_id,
            q=params.q,
        )


def get_resource(context: GetResourceContext) -> FetchedResource:
    """Download ``context.resource_id`` into ``context.tmp_dir``.

    Raises:
        UnauthenticatedError: If no service account secret is stored
        DownloadFailedError: If the object cannot be downloaded
    """
    service_account = _require_service_account(context.secrets)

    with tracer.start_as_current_span("gcs_catalog.get_resource"):
        return download_blob(
            bucket_name=context.catalog_config.bucket_name,
            service_account=service_account,
            resource_id=context.resource_id,
            tmp_dir=context.tmp_dir,
            log=context.log,
        )


@dataclass(frozen=True)
class CatalogPlugin:
    """Everything the host needs to register the catalog."""

    prepare: Callable[[PrepareContext], PrepareContext]
    list_resources: Callable[[ListResourcesContext], ListingResult]
    get_resource: Callable[[GetResourceContext], FetchedResource]
    metadata: Mapping[str, Any]
    config_schema: Mapping[str, Any]
    assert_config_valid: Callable[[Mapping[str, Any]], GCSCatalogConfig]


plugin = CatalogPlugin(
    prepare=prepare,
    list_resources=list_resources,
    get_resource=get_resource,
    metadata=METADATA,
    config_schema=CONFIG_SCHEMA,
    assert_config_valid=assert_config_valid,
)
