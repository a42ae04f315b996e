"""Exception hierarchy for gcs-catalog.

Operation errors carry the fixed message shown to catalog users. The
underlying cause is kept on ``__cause__`` and in the server logs only.
"""

from typing import Optional


class GCSCatalogError(Exception):
    """Base exception for all gcs-catalog errors."""

    default_message = "Google Cloud Storage catalog error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class ValidationError(GCSCatalogError):
    """Raised when a configuration or path fails validation."""

    pass


class MissingConfigurationError(GCSCatalogError):
    """Raised when the credential or bucket name is absent."""

    default_message = (
        "Service account and bucketName is required for Google Cloud Storage"
    )


class InvalidCredentialsError(GCSCatalogError):
    """Raised when credentials are malformed or rejected by the bucket probe."""

    default_message = (
        "Invalid bucketName or service account credentials for Google Cloud Storage"
    )


class UnauthenticatedError(GCSCatalogError):
    """Raised when an operation runs without a prepared secret."""

    default_message = "Service Account is required to access Google Cloud Storage"


class ListingFailedError(GCSCatalogError):
    """Raised when enumerating bucket contents fails."""

    default_message = (
        "Erreur dans le listage des fichiers / "
        "Authentification GCS possiblement incorrecte"
    )


class DownloadFailedError(GCSCatalogError):
    """Raised when fetching object metadata or content fails."""

    default_message = (
        "Erreur dans le téléchargement du fichier / "
        "Authentification GCS possiblement incorrecte"
    )
