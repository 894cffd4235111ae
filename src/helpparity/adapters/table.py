"""Registry adapter backed by the manifest's declarative command table."""

from __future__ import annotations

from collections.abc import Mapping

from helpparity.config.models import CommandSpec, Manifest
from helpparity.domain.parameters import ParameterDescriptor, collapse_parameters
from helpparity.exceptions import CommandNotFoundError


class TableRegistryAdapter:
    """Serves parameter contracts declared in a command table.

    Each command's parameters are listed once per parameter set they belong
    to; the adapter collapses them into one descriptor per parameter.
    """

    def __init__(self, commands: Mapping[str, CommandSpec]):
        self._commands = dict(commands)
        self._index = {name.casefold(): name for name in self._commands}

    @classmethod
    def from_manifest(cls, manifest: Manifest) -> TableRegistryAdapter:
        return cls(manifest.commands)

    def list_commands(self) -> list[str]:
        return sorted(self._commands, key=str.casefold)

    def list_parameters(self, command_name: str) -> list[ParameterDescriptor]:
        registered = self._index.get(command_name.casefold())
        if registered is None:
            raise CommandNotFoundError(command_name)
        return collapse_parameters(self._commands[registered].entries())
