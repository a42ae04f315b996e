"""Catalog configuration, secret and resource schemas for gcs-catalog.

Field names follow the host catalog contract (camelCase) through aliases, while
attributes stay snake_case. Models are mutable: the preparer rewrites the
configuration and secrets in place before the host persists them.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from gcs_catalog.progress import TaskLog

# Placeholder shown in the configuration once the real credential is stored
# in the secrets.
MASKED_SECRET = "*************************"


class CatalogModel(BaseModel):
    """Base model accepting both alias and attribute names."""

    model_config = ConfigDict(populate_by_name=True)


class GCSCatalogConfig(CatalogModel):
    """Catalog configuration as edited by users in the host application."""

    bucket_name: str = Field(
        ...,
        alias="bucketName",
        title="Bucket name",
        description="Name of the Google Cloud Storage bucket",
    )
    service_account: str = Field(
        ...,
        alias="serviceAccount",
        title="Service account",
        description="Service account credential JSON (masked once stored)",
    )


class CatalogSecrets(CatalogModel):
    """Secret store persisted by the host apart from the configuration."""

    service_account: Optional[str] = Field(None, alias="serviceAccount")

    @model_serializer(mode="wrap")
    def _drop_absent(self, handler):
        # A removed secret is dumped without its key, not as null
        return {
            key: value for key, value in handler(self).items() if value is not None
        }


class ListParams(CatalogModel):
    """Browsing parameters sent by the host for each listing."""

    current_folder_id: Optional[str] = Field(None, alias="currentFolderId")
    q: Optional[str] = None


class FolderEntry(CatalogModel):
    """A virtual folder (common prefix)."""

    id: str
    title: str
    type: Literal["folder"] = "folder"


class ResourceEntry(CatalogModel):
    """An object stored in the bucket."""

    id: str
    title: str
    type: Literal["resource"] = "resource"
    size: Optional[int] = None
    format: str = ""
    mime_type: Optional[str] = Field(None, alias="mimeType")


class ListingResult(CatalogModel):
    """One level of the bucket tree with its breadcrumb."""

    count: int
    results: list[Union[ResourceEntry, FolderEntry]] = Field(default_factory=list)
    path: list[FolderEntry] = Field(default_factory=list)


class FetchedResource(CatalogModel):
    """A downloaded object ready for ingestion by the host."""

    id: str
    title: str
    file_path: str = Field(..., alias="filePath")
    format: str


class PrepareContext(CatalogModel):
    """Arguments of the prepare hook."""

    catalog_config: GCSCatalogConfig = Field(..., alias="catalogConfig")
    capabilities: list[str] = Field(default_factory=list)
    secrets: CatalogSecrets = Field(default_factory=CatalogSecrets)


class ListResourcesContext(CatalogModel):
    """Arguments of the list hook."""

    catalog_config: GCSCatalogConfig = Field(..., alias="catalogConfig")
    secrets: CatalogSecrets = Field(default_factory=CatalogSecrets)
    params: ListParams = Field(default_factory=ListParams)


class GetResourceContext(CatalogModel):
    """Arguments of the download hook."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    catalog_config: GCSCatalogConfig = Field(..., alias="catalogConfig")
    secrets: CatalogSecrets = Field(default_factory=CatalogSecrets)
    resource_id: str = Field(..., alias="resourceId")
    tmp_dir: str = Field(..., alias="tmpDir")
    log: TaskLog
