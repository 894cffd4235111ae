"""Registry and documentation adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from helpparity.adapters.click_app import ClickRegistryAdapter, load_click_command
from helpparity.adapters.help_files import HelpFileAdapter
from helpparity.adapters.table import TableRegistryAdapter
from helpparity.exceptions import ConfigError

if TYPE_CHECKING:
    from helpparity.config.models import Manifest
    from helpparity.protocols import DocumentationAdapter, RegistryAdapter


def build_registry(manifest: Manifest) -> RegistryAdapter:
    """Create the registry adapter named by the manifest."""
    if manifest.registry.source == "click":
        if not manifest.registry.app:
            raise ConfigError("registry.app is required when registry.source is 'click'")
        return ClickRegistryAdapter.from_target(manifest.registry.app, manifest.base_dir)
    return TableRegistryAdapter.from_manifest(manifest)


def build_documentation(manifest: Manifest) -> DocumentationAdapter:
    """Create the documentation adapter named by the manifest."""
    return HelpFileAdapter(manifest.help_path)


__all__ = [
    "ClickRegistryAdapter",
    "HelpFileAdapter",
    "TableRegistryAdapter",
    "build_documentation",
    "build_registry",
    "load_click_command",
]
