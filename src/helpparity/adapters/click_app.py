"""Registry adapter that introspects a live click or typer application.

Commands are addressed by their space-joined path below the root
(``"config show"``). Click has no alternative parameter sets, so every
parameter belongs to the single default set.

Typer may build its commands on a bundled copy of click rather than the
installed ``click`` package, so commands, parameters and types are
recognised by their click class names instead of ``isinstance`` checks
against one click module.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any

import typer
from loguru import logger

from helpparity.constants import DEFAULT_PARAMETER_SET
from helpparity.domain.parameters import ParameterDescriptor, ParameterEntry, collapse_parameters
from helpparity.exceptions import CommandNotFoundError, ConfigError

# click type class name -> display name, most specific first
_TYPE_NAMES = (
    ("Choice", "Choice"),
    ("Path", "Path"),
    ("File", "File"),
    ("DateTime", "DateTime"),
    ("Tuple", "Tuple"),
    ("BoolParamType", "Boolean"),
    ("IntParamType", "Int"),
    ("FloatParamType", "Float"),
    ("UUIDParameterType", "UUID"),
    ("StringParamType", "String"),
)


def _class_names(obj: Any) -> set[str]:
    return {cls.__name__ for cls in type(obj).__mro__}


def is_click_command(obj: Any) -> bool:
    return "Command" in _class_names(obj) and hasattr(obj, "params")


def is_click_group(obj: Any) -> bool:
    return "Group" in _class_names(obj) and isinstance(getattr(obj, "commands", None), dict)


def load_click_command(target: str, search_path: Path | None = None) -> Any:
    """Import ``package.module:attr`` and return it as a click command.

    Typer applications are converted with ``typer.main.get_command``.
    ``search_path`` is put on ``sys.path`` first so modules next to the
    manifest can be imported.

    Raises:
        ConfigError: Malformed target, import failure, or an object that is
            neither a click command nor a typer app.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigError(f"Expected 'package.module:attr', got '{target}'")
    if search_path is not None and str(search_path) not in sys.path:
        sys.path.insert(0, str(search_path))
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import '{module_name}': {e}") from e
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ConfigError(f"'{module_name}' has no attribute '{attr_path}'") from e

    if isinstance(obj, typer.Typer):
        return typer.main.get_command(obj)
    if is_click_command(obj):
        return obj
    raise ConfigError(f"'{target}' is not a click command or typer app ({type(obj).__name__})")


def type_display_name(param: Any) -> str:
    """Canonical, capitalised display name for a click parameter's type."""
    if getattr(param, "is_flag", False):
        return "Switch"
    param_type = param.type
    names = _class_names(param_type)
    for class_name, display in _TYPE_NAMES:
        if class_name in names:
            return display
    return str(param_type.name).title().replace(" ", "")


def _is_contract_parameter(param: Any) -> bool:
    # Eager framework options (completion, version, help) never reach the callback
    return bool(param.name) and param.expose_value and not getattr(param, "hidden", False)


class ClickRegistryAdapter:
    """Serves parameter contracts of a click command tree."""

    def __init__(self, root: Any):
        self._commands: dict[str, Any] = {}
        if is_click_group(root):
            self._walk(root, prefix="")
        else:
            self._commands[root.name or "main"] = root
        self._index = {name.casefold(): name for name in self._commands}
        logger.debug(f"Introspected {len(self._commands)} click command(s)")

    @classmethod
    def from_target(cls, target: str, search_path: Path | None = None) -> ClickRegistryAdapter:
        return cls(load_click_command(target, search_path))

    def _walk(self, group: Any, prefix: str) -> None:
        for name, command in sorted(group.commands.items()):
            if getattr(command, "hidden", False):
                continue
            path = f"{prefix} {name}".strip()
            self._commands[path] = command
            if is_click_group(command):
                self._walk(command, prefix=path)

    def list_commands(self) -> list[str]:
        return sorted(self._commands, key=str.casefold)

    def list_parameters(self, command_name: str) -> list[ParameterDescriptor]:
        registered = self._index.get(" ".join(command_name.split()).casefold())
        if registered is None:
            raise CommandNotFoundError(command_name)
        command = self._commands[registered]
        entries = [
            ParameterEntry(
                name=param.name,
                type_name=type_display_name(param),
                parameter_set=DEFAULT_PARAMETER_SET,
                mandatory=bool(param.required),
            )
            for param in command.params
            if _is_contract_parameter(param)
        ]
        return collapse_parameters(entries)
