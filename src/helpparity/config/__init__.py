"""Configuration subsystem for helpparity.

Public API:
- Manifest: declarative command table plus registry/help sources
- load_manifest: load a manifest from YAML/JSON
- ValidatorSettings / load_settings: layered validator tunables
"""

from helpparity.config.loader import deep_merge, load_manifest
from helpparity.config.models import (
    CommandSpec,
    HelpSource,
    Manifest,
    ParameterSpec,
    RegistrySource,
)
from helpparity.config.settings import (
    ValidatorSettings,
    get_user_config_path,
    load_settings,
)

__all__ = [
    "CommandSpec",
    "HelpSource",
    "Manifest",
    "ParameterSpec",
    "RegistrySource",
    "ValidatorSettings",
    "deep_merge",
    "get_user_config_path",
    "load_manifest",
    "load_settings",
]
