"""Credential preparation run each time the host saves a configuration.

The credential moves from the configuration to the secret store and is
replaced by ``MASKED_SECRET``. The decision depends on three facts:

    masked  new value  secret present   action
    no      yes        any              ROTATE
    no      no ("")    yes              REMOVE
    no      no ("")    no               KEEP
    yes     no         any              KEEP
"""

from enum import Enum

from gcs_catalog.core import get_logger, get_tracer
from gcs_catalog.core.exceptions import MissingConfigurationError
from gcs_catalog.objectstorage.permissions import verify_bucket_access
from gcs_catalog.schemas import MASKED_SECRET, PrepareContext

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class CredentialAction(str, Enum):
    """What to do with the service account found in the configuration."""

    ROTATE = "rotate"
    REMOVE = "remove"
    KEEP = "keep"


def resolve_credential_action(
    masked: bool, secret_present: bool, new_value_provided: bool
) -> CredentialAction:
    """Map the configuration state to a credential action."""
    if new_value_provided and not masked:
        return CredentialAction.ROTATE
    if not masked and not new_value_provided and secret_present:
        return CredentialAction.REMOVE
    return CredentialAction.KEEP


def prepare(context: PrepareContext) -> PrepareContext:
    """Store the credential as a secret and check it against the bucket.

    The configuration and secrets of ``context`` are updated in place, even
    when a validation error is raised afterwards.

    Args:
        context: Configuration, capabilities and secrets from the host

    Returns:
        The same context, with a masked configuration

    Raises:
        MissingConfigurationError: If the secret or the bucket name is absent
        InvalidCredentialsError: If the bucket cannot be listed with the secret
    """
    config = context.catalog_config
    secrets = context.secrets
    value = config.service_account

    with tracer.start_as_current_span("gcs_catalog.prepare"):
        masked = value == MASKED_SECRET
        action = resolve_credential_action(
            masked=masked,
            secret_present=bool(secrets.service_account),
            new_value_provided=bool(value) and not masked,
        )
        logger.info(
            "Preparing GCS catalog", bucket=config.bucket_name, action=action.value
        )

        if action is CredentialAction.ROTATE:
            secrets.service_account = value
            config.service_account = MASKED_SECRET
        elif action is CredentialAction.REMOVE:
            secrets.service_account = None

        if not (secrets.service_account and config.bucket_name):
            raise MissingConfigurationError()

        verify_bucket_access(config.bucket_name, secrets.service_account)

    return context
