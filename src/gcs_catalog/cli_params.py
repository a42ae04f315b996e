"""Shared CLI parameter definitions.

Options used by several commands are declared once here as ``Annotated``
aliases so that names and help texts stay consistent across commands.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

ServiceAccountFileOption = Annotated[
    Path,
    typer.Option(
        "--service-account-file",
        "-k",
        help="Path to the service account credential JSON file",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]

QueryOption = Annotated[
    Optional[str],
    typer.Option("--query", "-q", help="Only list names containing this text"),
]

TmpDirOption = Annotated[
    Path,
    typer.Option(
        "--tmp-dir",
        help="Directory receiving the downloaded file",
        file_okay=False,
    ),
]

GSPathArgument = Annotated[
    str, typer.Argument(help="GCS path in format gs://bucket/prefix")
]
