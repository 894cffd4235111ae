"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from helpparity.domain.help import HelpRecord, ParameterDoc, RelatedLink
from helpparity.domain.parameters import ParameterDescriptor

ENV_VARS = (
    "HELPPARITY_CONFIG",
    "HELPPARITY_MANIFEST",
    "HELPPARITY_STRICT",
    "HELPPARITY_JOBS",
    "HELPPARITY_FORMAT",
    "HELPPARITY_EXCLUDE",
    "HELPPARITY_DISABLED_RULES",
    "HELPPARITY_PLACEHOLDER_MARKERS",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the developer's user config and HELPPARITY_* variables out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    user_config = tmp_path / "user-config" / "config.yaml"
    monkeypatch.setenv("HELPPARITY_CONFIG", str(user_config))
    return user_config


# =============================================================================
# Builders
# =============================================================================


def make_parameter(
    name: str,
    type_name: str = "String",
    mandatory: bool = False,
    sets: dict[str, bool] | None = None,
) -> ParameterDescriptor:
    """Build a descriptor in a single default set unless ``sets`` is given."""
    return ParameterDescriptor(
        name=name,
        type_name=type_name,
        parameter_sets=sets if sets is not None else {"__AllParameterSets": mandatory},
    )


def make_help(
    command_name: str = "Example-Command",
    parameters: dict[str, dict[str, Any]] | None = None,
    synopsis: str = "Run the example command.",
    description: str = "Runs the example command against one host.",
    links: list[RelatedLink] | None = None,
) -> HelpRecord:
    """Build a help record; ``parameters`` maps name -> ParameterDoc fields."""
    docs = {
        name: ParameterDoc(name=name, **fields) for name, fields in (parameters or {}).items()
    }
    return HelpRecord(
        command_name=command_name,
        synopsis=synopsis,
        description=description,
        related_links=links
        if links is not None
        else [RelatedLink(text="Online version", uri="https://example.org/example-command")],
        parameter_docs=docs,
    )


def write_yaml(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False))
    return path


# =============================================================================
# File fixtures
# =============================================================================


EXAMPLE_HELP = {
    "synopsis": "Run the example command against a single host.",
    "description": "Connects to the target host and runs the example operation.",
    "related_links": [{"text": "Online version", "uri": "https://example.org/example-command"}],
    "parameters": {
        "target": {"text": "The target host.", "required": True, "type": "String"},
    },
}


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project with a manifest for Example-Command and a help directory."""
    root = tmp_path / "project"
    write_yaml(
        root / "helpparity.yaml",
        {
            "version": 1,
            "registry": {"source": "table"},
            "help": {"path": "help"},
            "commands": {
                "Example-Command": {
                    "primary": ["target"],
                    "parameters": [
                        {"name": "target", "type": "String", "mandatory": True},
                        {"name": "verbose", "type": "Switch"},
                    ],
                },
            },
        },
    )
    write_yaml(root / "help" / "Example-Command.yaml", EXAMPLE_HELP)
    return root


@pytest.fixture
def manifest_path(project_dir: Path) -> Path:
    return project_dir / "helpparity.yaml"
