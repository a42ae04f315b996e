"""Catalog plugin hooks for the host application."""

from .metadata import CAPABILITIES, CONFIG_SCHEMA, METADATA, assert_config_valid
from .plugin import CatalogPlugin, get_resource, list_resources, plugin
from .prepare import CredentialAction, prepare, resolve_credential_action

__all__ = [
    "CAPABILITIES",
    "CONFIG_SCHEMA",
    "METADATA",
    "CatalogPlugin",
    "CredentialAction",
    "assert_config_valid",
    "get_resource",
    "list_resources",
    "plugin",
    "prepare",
    "resolve_credential_action",
]
