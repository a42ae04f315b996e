"""Static plugin description: capabilities and configuration schema."""

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from gcs_catalog.core.exceptions import ValidationError
from gcs_catalog.schemas import GCSCatalogConfig

CAPABILITIES = ["import", "search"]

METADATA = {
    "title": "Catalog Google Cloud Storage",
    "description": "Google Cloud Storage plugin for Data Fair Catalog",
    "capabilities": CAPABILITIES,
}

CONFIG_SCHEMA: dict[str, Any] = GCSCatalogConfig.model_json_schema(by_alias=True)


def assert_config_valid(data: Mapping[str, Any]) -> GCSCatalogConfig:
    """Validate a raw configuration mapping.

    Raises:
        ValidationError: If a field is missing or has the wrong type
    """
    try:
        return GCSCatalogConfig.model_validate(data)
    except PydanticValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        raise ValidationError(f"Invalid catalog configuration: {fields}") from e
