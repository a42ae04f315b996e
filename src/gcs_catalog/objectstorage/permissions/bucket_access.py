"""Bucket reachability probe used when credentials are saved."""

from gcs_catalog.core import get_logger
from gcs_catalog.core.exceptions import InvalidCredentialsError
from gcs_catalog.objectstorage.clients import GCSClientConfig, GCSClientManager

logger = get_logger(__name__)


def verify_bucket_access(bucket_name: str, service_account: str) -> bool:
    """Verify that the credential can list the bucket.

    At most one object is requested, so the probe costs a single listing page.

    Args:
        bucket_name: GCS bucket name
        service_account: Service account credential JSON

    Returns:
        True if the bucket is reachable

    Raises:
        InvalidCredentialsError: If the credential is malformed or rejected
    """
    logger.info("Verifying GCS bucket access", bucket=bucket_name)

    try:
        client_manager = GCSClientManager(
            GCSClientConfig(service_account=service_account)
        )
        list(client_manager.client.list_blobs(bucket_name, max_results=1))
    except Exception as e:
        logger.error(
            "Error accessing Google Cloud Storage",
            bucket=bucket_name,
            error=str(e),
            exc_info=True,
        )
        raise InvalidCredentialsError() from e

    logger.info("GCS bucket access verified", bucket=bucket_name)
    return True
