"""Protocol injection fakes for unit tests.

Each fake implements a Protocol structurally (duck typing). Behaviour is explicit
in the class body -- no implicit MagicMock returns. Tests inject fakes via
constructor args or function parameters, never via unittest.mock.patch on
internal modules.
"""

from __future__ import annotations

import threading

from helpparity.domain.help import HelpRecord
from helpparity.domain.parameters import ParameterDescriptor
from helpparity.exceptions import CommandNotFoundError, HelpNotFoundError


class FakeRegistry:
    """In-memory RegistryAdapter keyed by command name."""

    def __init__(self, commands: dict[str, list[ParameterDescriptor]] | None = None):
        self._commands = dict(commands or {})
        self._lock = threading.Lock()
        self.calls: list[str] = []

    def list_commands(self) -> list[str]:
        return sorted(self._commands, key=str.casefold)

    def list_parameters(self, command_name: str) -> list[ParameterDescriptor]:
        with self._lock:
            self.calls.append(command_name)
        for name, parameters in self._commands.items():
            if name.casefold() == command_name.casefold():
                return sorted(parameters, key=lambda p: p.key)
        raise CommandNotFoundError(command_name)


class FakeDocs:
    """In-memory DocumentationAdapter keyed by command name.

    A record given as an exception is raised instead, standing in for a help
    file that exists but cannot be parsed.
    """

    def __init__(self, records: dict[str, HelpRecord | Exception] | None = None):
        self._records = dict(records or {})
        self._lock = threading.Lock()
        self.calls: list[str] = []

    def get_help(self, command_name: str) -> HelpRecord:
        with self._lock:
            self.calls.append(command_name)
        for name, record in self._records.items():
            if name.casefold() == command_name.casefold():
                if isinstance(record, Exception):
                    raise record
                return record
        raise HelpNotFoundError(command_name)
