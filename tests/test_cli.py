"""Tests for the command-line interface."""

import io
from unittest.mock import MagicMock

import pytest
from conftest import FakeBlobIterator, make_blob
from typer.testing import CliRunner

from gcs_catalog import __version__
from gcs_catalog.cli import app

runner = CliRunner()


@pytest.fixture
def key_file(tmp_path, service_account_json):
    """A service account file on disk."""
    path = tmp_path / "key.json"
    path.write_text(service_account_json)
    return path


class TestCli:
    """Test CLI commands against a mocked bucket."""

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"gcs-catalog {__version__}" in result.output

    def test_prepare(self, gcs_client, key_file):
        """Test a valid service account is reported as masked."""
        gcs_client.list_blobs.return_value = FakeBlobIterator()

        result = runner.invoke(
            app, ["prepare", "test-bucket", "--service-account-file", str(key_file)]
        )

        assert result.exit_code == 0
        assert "Service account: *************************" in result.output
        assert "Credentials valid" in result.output

    def test_prepare_invalid_credentials(self, gcs_client, tmp_path):
        """Test an unreadable key exits with an error."""
        bad_key = tmp_path / "bad.json"
        bad_key.write_text("not-a-json")

        result = runner.invoke(
            app, ["prepare", "test-bucket", "--service-account-file", str(bad_key)]
        )

        assert result.exit_code == 1
        assert "Error: Invalid bucketName or service account credentials" in (
            result.output
        )

    def test_list(self, gcs_client, key_file):
        """Test files and folders are printed, adding the trailing slash."""
        gcs_client.list_blobs.return_value = FakeBlobIterator(
            blobs=[make_blob("data/file1.csv", 2048, "text/csv")],
            prefixes=["data/2024/"],
        )

        result = runner.invoke(
            app, ["list", "gs://test-bucket/data", "-k", str(key_file), "-q", "file"]
        )

        assert result.exit_code == 0
        assert "Found 2 items:" in result.output
        assert "data/file1.csv (2.00 KB)" in result.output
        assert "data/2024/" in result.output
        kwargs = gcs_client.list_blobs.call_args.kwargs
        assert kwargs["prefix"] == "data/"
        assert kwargs["match_glob"] == "data/*file**"

    def test_list_invalid_path(self, key_file):
        """Test a non-GCS path exits with an error."""
        result = runner.invoke(app, ["list", "s3://bucket/data", "-k", str(key_file)])

        assert result.exit_code == 1
        assert "Error: GCS path must start with 'gs://'" in result.output

    def test_get(self, gcs_client, key_file, tmp_path):
        """Test an object is downloaded into the requested directory."""
        blob = MagicMock()
        blob.size = 5
        blob.open.side_effect = lambda *args, **kwargs: io.BytesIO(b"hello")
        gcs_client.bucket.return_value.blob.return_value = blob
        out_dir = tmp_path / "out"

        result = runner.invoke(
            app,
            [
                "get",
                "gs://test-bucket/data/hello.txt",
                "-k",
                str(key_file),
                "--tmp-dir",
                str(out_dir),
            ],
        )

        assert result.exit_code == 0
        assert (out_dir / "hello.txt").read_bytes() == b"hello"
        assert "Format: txt" in result.output

    def test_get_failure(self, gcs_client, key_file, tmp_path):
        """Test a failed download exits with the generic message."""
        gcs_client.bucket.return_value.blob.return_value.reload.side_effect = (
            LookupError("404")
        )

        result = runner.invoke(
            app,
            [
                "get",
                "gs://test-bucket/missing.csv",
                "-k",
                str(key_file),
                "--tmp-dir",
                str(tmp_path),
            ],
        )

        assert result.exit_code == 1
        assert "Erreur dans le téléchargement du fichier" in result.output
