"""Documentation adapter reading help records from YAML/JSON files.

Two layouts are supported:

- a directory holding one file per command (``Invoke-Task.yaml``,
  ``config-show.yml``, ``run.json``); file stems match command names
  case-insensitively, with spaces in command paths written as ``-`` or ``_``
- a single bundle file mapping command name -> record

Record layout::

    synopsis: Run a task on remote targets.
    description: Long-form text.
    related_links:
      - text: Online version
        uri: https://example.org/invoke-task
    parameters:
      target:
        text: The target host.
        required: true
        type: String

Values are kept as authored; in particular ``type`` keeps its surrounding
whitespace so the checker decides how to normalise it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from loguru import logger

from helpparity.config.loader import load_file
from helpparity.constants import HELP_FILE_SUFFIXES
from helpparity.domain.help import HelpRecord, ParameterDoc, RelatedLink
from helpparity.exceptions import ConfigError, HelpNotFoundError


def _lookup_keys(command_name: str) -> list[str]:
    key = " ".join(command_name.split()).casefold()
    return list(dict.fromkeys([key, key.replace(" ", "-"), key.replace(" ", "_")]))


def _render_required(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _parse_links(raw: Any, source: str) -> list[RelatedLink]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError(f"related_links must be a list ({source})")
    links = []
    for item in raw:
        if isinstance(item, str):
            links.append(RelatedLink(text=item, uri=item))
        elif isinstance(item, dict):
            links.append(
                RelatedLink(text=str(item.get("text") or ""), uri=str(item.get("uri") or ""))
            )
        else:
            raise ConfigError(f"related_links entries must be strings or mappings ({source})")
    return links


def _parse_parameter(name: str, raw: Any, source: str) -> ParameterDoc:
    if raw is None:
        raw = {}
    if isinstance(raw, str):
        raw = {"text": raw}
    if not isinstance(raw, dict):
        raise ConfigError(f"parameter '{name}' must be a mapping ({source})")
    declared = raw.get("type", raw.get("declared_type"))
    return ParameterDoc(
        name=name,
        text=str(raw.get("text") or ""),
        required=_render_required(raw.get("required")),
        declared_type=None if declared is None else str(declared),
    )


def _parse_parameters(raw: Any, source: str) -> dict[str, ParameterDoc]:
    if raw is None:
        return {}
    docs: dict[str, ParameterDoc] = {}
    if isinstance(raw, dict):
        for name, entry in raw.items():
            docs[str(name)] = _parse_parameter(str(name), entry, source)
    elif isinstance(raw, list):
        for entry in raw:
            if not isinstance(entry, dict) or not entry.get("name"):
                raise ConfigError(f"parameter list entries need a 'name' ({source})")
            name = str(entry["name"])
            docs[name] = _parse_parameter(name, entry, source)
    else:
        raise ConfigError(f"parameters must be a mapping or list ({source})")
    return docs


def parse_help_record(command_name: str, raw: dict[str, Any], source: str) -> HelpRecord:
    """Build a HelpRecord from a raw mapping.

    Raises:
        ConfigError: If the mapping has the wrong shape.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"Help record for '{command_name}' must be a mapping ({source})")
    return HelpRecord(
        command_name=command_name,
        synopsis=str(raw.get("synopsis") or ""),
        description=str(raw.get("description") or ""),
        related_links=_parse_links(raw.get("related_links"), source),
        parameter_docs=_parse_parameters(raw.get("parameters"), source),
    )


class HelpFileAdapter:
    """Serves help records from a help directory or bundle file."""

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._files: dict[str, Path] = {}
        self._bundle: dict[str, tuple[str, Any]] = {}

        if self._path.is_dir():
            for file in sorted(self._path.iterdir()):
                if file.is_file() and file.suffix in HELP_FILE_SUFFIXES:
                    self._files.setdefault(file.stem.casefold(), file)
            logger.debug(f"Indexed {len(self._files)} help file(s) in {self._path}")
        elif self._path.is_file():
            for name, record in load_file(self._path).items():
                self._bundle[" ".join(str(name).split()).casefold()] = (str(name), record)
            logger.debug(f"Loaded {len(self._bundle)} help record(s) from {self._path}")
        else:
            raise ConfigError(f"Help path not found: {self._path}")

    def get_help(self, command_name: str) -> HelpRecord:
        for key in _lookup_keys(command_name):
            if key in self._files:
                file = self._files[key]
                return parse_help_record(command_name, load_file(file), str(file))
            if key in self._bundle:
                _, raw = self._bundle[key]
                return parse_help_record(command_name, raw, str(self._path))
        raise HelpNotFoundError(command_name)
