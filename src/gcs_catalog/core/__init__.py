"""Core utilities and shared components for gcs-catalog."""

from .config import settings
from .exceptions import GCSCatalogError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "GCSCatalogError", "ValidationError", "get_logger", "get_tracer"]
