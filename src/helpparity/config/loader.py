"""YAML/JSON loader for helpparity manifests.

Loading contract:
- Every misspelt key is reported in one ConfigError, at any nesting level,
  with the file path and a did-you-mean suggestion where one is close
- Remaining pydantic errors are rendered as ``loc: msg`` lines
- Relative paths in the manifest resolve against the manifest's directory
"""

from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, ValidationError

from helpparity.config.models import (
    CommandSpec,
    HelpSource,
    Manifest,
    ParameterSpec,
    RegistrySource,
)
from helpparity.exceptions import ConfigError

__all__ = ["deep_merge", "format_validation_error", "load_file", "load_manifest"]

_PARSERS = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def load_manifest(path: Path | str) -> Manifest:
    """Load and validate a manifest file.

    Args:
        path: Path to a YAML or JSON manifest.

    Returns:
        Validated Manifest with its base directory set to the file's parent.

    Raises:
        ConfigError: Missing file, parse error, unknown keys or schema violation.
    """
    path = Path(path)
    raw = load_file(path)
    # Documentation only
    raw.pop("version", None)

    problems = _unknown_keys(raw)
    if problems:
        raise ConfigError("\n".join(f"{problem} (in {path})" for problem in problems))

    try:
        manifest = Manifest.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(format_validation_error(e, path)) from e

    logger.debug(f"Loaded manifest {path} with {len(manifest.commands)} command(s)")
    return manifest.with_base_dir(path.resolve().parent)


def load_file(path: Path | str) -> dict[str, Any]:
    """Parse a YAML or JSON file that must hold a mapping (empty file = {}).

    Raises:
        ConfigError: Missing file, unsupported suffix, parse error or non-mapping.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"File not found: {path}")
    parse = _PARSERS.get(path.suffix.lower())
    if parse is None:
        raise ConfigError(f"Unsupported format '{path.suffix}': use .yaml or .json")
    try:
        data = parse(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Parse error in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping (got {type(data).__name__}): {path}")
    return data


def format_validation_error(error: ValidationError, path: Path | str | None = None) -> str:
    """Render pydantic errors as one ``loc: msg`` line each."""
    header = f"Invalid configuration in {path}:" if path else "Invalid configuration:"
    lines = [header]
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        lines.append(f"  {loc}: {err['msg']}")
    return "\n".join(lines)


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``overlay`` merged over ``base``.

    Nested mappings merge key by key; any other overlay value replaces the
    base value. Neither input is modified.
    """
    merged = deepcopy(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged


# =============================================================================
# Unknown-key detection
# =============================================================================


def _unknown_keys(raw: dict[str, Any]) -> list[str]:
    problems = _check_section(raw, Manifest, "")
    for section, model in (("registry", RegistrySource), ("help", HelpSource)):
        if isinstance(raw.get(section), dict):
            problems += _check_section(raw[section], model, f"{section}.")

    commands = raw.get("commands")
    if isinstance(commands, dict):
        for name, spec in commands.items():
            if not isinstance(spec, dict):
                continue
            prefix = f"commands.{name}."
            problems += _check_section(spec, CommandSpec, prefix)
            parameters = spec.get("parameters")
            if isinstance(parameters, list):
                for i, parameter in enumerate(parameters):
                    if isinstance(parameter, dict):
                        problems += _check_section(
                            parameter, ParameterSpec, f"{prefix}parameters.{i}."
                        )
    return problems


def _check_section(raw: dict[str, Any], model: type[BaseModel], prefix: str) -> list[str]:
    known = set(model.model_fields)
    problems = []
    for key in sorted(set(raw) - known, key=str):
        message = f"Unknown field '{prefix}{key}'"
        suggestion = _did_you_mean(str(key), known)
        if suggestion:
            message += f" - did you mean '{prefix}{suggestion}'?"
        problems.append(message)
    return problems


def _did_you_mean(key: str, candidates: set[str], max_distance: int = 3) -> str | None:
    """Closest candidate within ``max_distance`` edits (ties go alphabetically)."""
    scored = sorted((_levenshtein(key, candidate), candidate) for candidate in candidates)
    if scored and scored[0][0] <= max_distance:
        return scored[0][1]
    return None


def _levenshtein(a: str, b: str) -> int:
    """Edit distance with unit-cost insert, delete and substitute."""
    if len(a) < len(b):
        a, b = b, a
    row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        diagonal, row[0] = row[0], i
        for j, char_b in enumerate(b, start=1):
            substitute = diagonal + (char_a != char_b)
            diagonal = row[j]
            row[j] = min(row[j] + 1, row[j - 1] + 1, substitute)
    return row[-1]
