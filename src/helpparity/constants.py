"""Constants for the helpparity validator."""

import os
from pathlib import Path

# Framework-injected parameters that are not part of a command's authored
# contract. Shared process-wide and never mutated.
EXCLUDED_PARAMETERS: frozenset[str] = frozenset(
    {
        "Verbose",
        "Debug",
        "ErrorAction",
        "ErrorVariable",
        "InformationAction",
        "InformationVariable",
        "OutBuffer",
        "OutVariable",
        "PipelineVariable",
        "WarningAction",
        "WarningVariable",
        "Confirm",
        "WhatIf",
    }
)

# Markers left in a synopsis when help was generated and never authored
DEFAULT_PLACEHOLDER_MARKERS: tuple[str, ...] = (
    "[<CommonParameters>]",
    "{{ Fill in the Synopsis }}",
)

# Parameter set assigned to commands that do not declare alternative forms
DEFAULT_PARAMETER_SET = "__AllParameterSets"

# Manifest discovery
# Precedence: CLI --manifest > HELPPARITY_MANIFEST env var > "helpparity.yaml"
DEFAULT_MANIFEST = Path(os.environ.get("HELPPARITY_MANIFEST", "helpparity.yaml"))

HELP_FILE_SUFFIXES = (".yaml", ".yml", ".json")

ENV_PREFIX = "HELPPARITY_"

# Report output formats understood by the CLI
OUTPUT_FORMATS = ("table", "json", "github")

SCHEMA_VERSION = "1.0.0"
