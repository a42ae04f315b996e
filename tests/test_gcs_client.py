"""Tests for GCS client management."""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from gcs_catalog.core.exceptions import ValidationError
from gcs_catalog.objectstorage.clients import GCSClientConfig, GCSClientManager


class TestGCSClientManager:
    """Test client creation from service account JSON."""

    def test_client_created_lazily(self, mock_storage, service_account_json):
        """Test no client exists until first use, then it is reused."""
        manager = GCSClientManager(GCSClientConfig(service_account=service_account_json))
        mock_storage.Client.assert_not_called()

        first = manager.client
        second = manager.client

        assert first is second
        assert mock_storage.Client.call_count == 1

    def test_project_from_credential(self, mock_storage, service_account_json):
        """Test the project defaults to the credential project_id."""
        GCSClientManager(GCSClientConfig(service_account=service_account_json)).client

        assert mock_storage.Client.call_args.kwargs["project"] == "test-project"

    def test_project_override(self, mock_storage, service_account_json):
        """Test an explicit project wins over the credential one."""
        config = GCSClientConfig(
            service_account=service_account_json, project="billing-project"
        )

        GCSClientManager(config).client

        assert mock_storage.Client.call_args.kwargs["project"] == "billing-project"

    def test_credentials_built_from_info(self, mock_storage, service_account_json):
        """Test the decoded document is handed to google-auth."""
        from gcs_catalog.objectstorage.clients import gcs_client

        GCSClientManager(GCSClientConfig(service_account=service_account_json)).client

        from_info = gcs_client.service_account.Credentials.from_service_account_info
        from_info.assert_called_once_with(json.loads(service_account_json))
        assert mock_storage.Client.call_args.kwargs["credentials"] is (
            from_info.return_value
        )

    def test_invalid_json(self):
        """Test a document that is not JSON is rejected."""
        manager = GCSClientManager(GCSClientConfig(service_account="not-a-json"))

        with pytest.raises(ValidationError, match="not valid JSON"):
            manager.credential_info()

    def test_json_not_an_object(self):
        """Test a JSON document that is not an object is rejected."""
        manager = GCSClientManager(GCSClientConfig(service_account='["a", "b"]'))

        with pytest.raises(ValidationError, match="must be an object"):
            manager.credential_info()

    def test_config_forbids_extra_fields(self):
        """Test unknown client options are refused."""
        with pytest.raises(PydanticValidationError):
            GCSClientConfig(service_account="{}", region="europe-west1")


class TestParseGSPath:
    """Test gs:// path parsing."""

    def test_bucket_and_prefix(self):
        """Test a path with a prefix."""
        assert GCSClientManager.parse_gs_path("gs://bucket/data/2024/") == (
            "bucket",
            "data/2024/",
        )

    def test_bucket_only(self):
        """Test a path to the bucket root."""
        assert GCSClientManager.parse_gs_path("gs://bucket") == ("bucket", "")

    def test_wrong_scheme(self):
        """Test a non-GCS path is rejected."""
        with pytest.raises(ValidationError, match="must start with 'gs://'"):
            GCSClientManager.parse_gs_path("s3://bucket/data")

    def test_missing_bucket(self):
        """Test a path without bucket is rejected."""
        with pytest.raises(ValidationError, match="missing bucket"):
            GCSClientManager.parse_gs_path("gs:///data")
