"""GCS client configuration and management.

This module builds Google Cloud Storage clients from service account
credential JSON, as stored in the catalog secrets.

The GCSClientManager parses the credential material lazily: nothing is
decoded and no client is created until the ``client`` property is first
accessed. Each catalog operation builds its own manager, so clients are
never shared between calls.
"""

import json
from typing import Any, Optional
from urllib.parse import urlparse

from google.cloud import storage
from google.oauth2 import service_account
from pydantic import BaseModel, ConfigDict, Field

from gcs_catalog.core import get_logger
from gcs_catalog.core.exceptions import ValidationError

logger = get_logger(__name__)


class GCSClientConfig(BaseModel):
    """Configuration for GCS client connections.

    Example:
        config = GCSClientConfig(
            service_account=open("key.json").read(),
        )

        # Bill requests to another project than the credential's own
        config = GCSClientConfig(
            service_account=open("key.json").read(),
            project="my-other-project",
        )
    """

    model_config = ConfigDict(extra="forbid")

    service_account: str = Field(
        ..., description="Service account credential JSON document"
    )
    project: Optional[str] = Field(
        None, description="Project override, defaults to the credential project_id"
    )


class GCSClientManager:
    """Manages GCS client connections and provides utility methods."""

    def __init__(self, config: GCSClientConfig):
        """Initialize GCS client manager.

        Args:
            config: GCS client configuration
        """
        self.config = config
        self._client = None

    @property
    def client(self):
        """Get or create GCS client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def credential_info(self) -> dict[str, Any]:
        """Decode the service account JSON.

        Raises:
            ValidationError: If the document is not a JSON object
        """
        try:
            info = json.loads(self.config.service_account)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Service account is not valid JSON: {e}") from e

        if not isinstance(info, dict):
            raise ValidationError("Service account JSON must be an object")
        return info

    def _create_client(self):
        """Create google-cloud-storage client from the credential JSON."""
        info = self.credential_info()
        credentials = service_account.Credentials.from_service_account_info(info)
        project = self.config.project or info.get("project_id")

        client = storage.Client(project=project, credentials=credentials)
        logger.info(
            "GCS client created with service account",
            project=project,
            client_email=info.get("client_email"),
        )
        return client

    @staticmethod
    def parse_gs_path(gs_path: str) -> tuple[str, str]:
        """Parse GCS path into bucket and prefix components.

        Args:
            gs_path: GCS path in format gs://bucket/prefix or gs://bucket

        Returns:
            Tuple of (bucket_name, prefix)

        Raises:
            ValidationError: If path format is invalid
        """
        if not gs_path.startswith("gs://"):
            raise ValidationError(f"GCS path must start with 'gs://': {gs_path}")

        parsed = urlparse(gs_path)
        bucket = parsed.netloc
        prefix = parsed.path.lstrip("/")

        if not bucket:
            raise ValidationError(f"Invalid GCS path, missing bucket: {gs_path}")

        logger.debug("GCS path parsed", bucket=bucket, prefix=prefix)
        return bucket, prefix
