"""GCS client management."""

from .gcs_client import GCSClientConfig, GCSClientManager

__all__ = ["GCSClientConfig", "GCSClientManager"]
