"""Command-line interface for gcs-catalog.

Runs the catalog hooks outside the host application, to check a service
account or browse a bucket the way catalog users will see it.

Commands:
    - prepare: Validate a service account against a bucket
    - list: List folders and files of one bucket level
    - get: Download one object with progress logging
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .catalog import get_resource, list_resources, prepare
from .cli_params import (
    GSPathArgument,
    QueryOption,
    ServiceAccountFileOption,
    TmpDirOption,
)
from .objectstorage.clients import GCSClientManager
from .progress import StructlogTaskLog
from .schemas import (
    CatalogSecrets,
    GCSCatalogConfig,
    GetResourceContext,
    ListParams,
    ListResourcesContext,
    PrepareContext,
    ResourceEntry,
)

app = typer.Typer(
    name="gcs-catalog",
    help="Google Cloud Storage catalog plugin tools.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"gcs-catalog {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    GCS-Catalog: browse and download Google Cloud Storage objects.
    """
    pass


def _secrets_from_file(service_account_file: Path) -> CatalogSecrets:
    return CatalogSecrets(service_account=service_account_file.read_text())


def _format_size(size: Optional[int]) -> str:
    if size is None:
        return "unknown size"
    if size >= 1024**3:
        return f"{size / (1024**3):.2f} GB"
    elif size >= 1024**2:
        return f"{size / (1024**2):.2f} MB"
    elif size >= 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size} bytes"


@app.command("prepare")
def prepare_cmd(
    bucket: Annotated[str, typer.Argument(help="Bucket name")],
    service_account_file: ServiceAccountFileOption,
) -> None:
    """
    Check that a service account can list a bucket.

    Example:
        gcs-catalog prepare my-bucket --service-account-file key.json
    """
    try:
        context = PrepareContext(
            catalog_config=GCSCatalogConfig(
                bucket_name=bucket,
                service_account=service_account_file.read_text(),
            ),
        )
        result = prepare(context)

        typer.echo(f"Bucket: {result.catalog_config.bucket_name}")
        typer.echo(f"Service account: {result.catalog_config.service_account}")
        typer.echo("Credentials valid")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("list")
def list_cmd(
    path: GSPathArgument,
    service_account_file: ServiceAccountFileOption,
    query: QueryOption = None,
) -> None:
    """
    List folders and files directly under a GCS prefix.

    Examples:
        gcs-catalog list gs://my-bucket --service-account-file key.json
        gcs-catalog list gs://my-bucket/data/ -k key.json --query report
    """
    try:
        bucket, prefix = GCSClientManager.parse_gs_path(path)
        if prefix and not prefix.endswith("/"):
            prefix += "/"

        listing = list_resources(
            ListResourcesContext(
                catalog_config=GCSCatalogConfig(bucket_name=bucket, service_account=""),
                secrets=_secrets_from_file(service_account_file),
                params=ListParams(current_folder_id=prefix, q=query),
            )
        )

        typer.echo(f"Found {listing.count} items:")
        for entry in listing.results:
            if isinstance(entry, ResourceEntry):
                typer.echo(f"  {entry.id} ({_format_size(entry.size)})")
            else:
                typer.echo(f"  {entry.id}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("get")
def get_cmd(
    path: GSPathArgument,
    service_account_file: ServiceAccountFileOption,
    tmp_dir: TmpDirOption = Path("."),
) -> None:
    """
    Download one object into a local directory.

    Example:
        gcs-catalog get gs://my-bucket/data/file.csv -k key.json --tmp-dir /tmp
    """
    try:
        bucket, resource_id = GCSClientManager.parse_gs_path(path)
        tmp_dir.mkdir(parents=True, exist_ok=True)

        resource = get_resource(
            GetResourceContext(
                catalog_config=GCSCatalogConfig(bucket_name=bucket, service_account=""),
                secrets=_secrets_from_file(service_account_file),
                resource_id=resource_id,
                tmp_dir=str(tmp_dir),
                log=StructlogTaskLog(),
            )
        )

        typer.echo(f"Downloaded: {resource.file_path}")
        typer.echo(f"Format: {resource.format or 'none'}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
