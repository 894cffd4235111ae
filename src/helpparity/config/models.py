"""Manifest models: the declarative command table and its sources.

A manifest lists every command to validate, its primary parameters and,
when the registry source is ``table``, the command's expected parameter
contract. It is loaded once per run and iterated generically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from helpparity.constants import DEFAULT_PARAMETER_SET
from helpparity.domain.parameters import ParameterEntry
from helpparity.domain.report import ValidationRequest

# =============================================================================
# Command table
# =============================================================================


class ParameterSpec(BaseModel):
    """One parameter of a command in the declarative table.

    ``mandatory`` is shorthand for a command without alternative parameter
    sets; use ``sets`` to spell out per-set mandatoriness.
    """

    model_config = {"extra": "forbid"}

    name: str = Field(..., min_length=1, description="Parameter name")
    type: str = Field(default="String", description="Canonical type display name")
    sets: dict[str, bool] = Field(
        default_factory=dict,
        description="Parameter set name -> mandatory in that set",
    )
    mandatory: bool | None = Field(
        default=None, description="Shorthand for a single default parameter set"
    )

    @model_validator(mode="after")
    def mandatory_or_sets(self) -> ParameterSpec:
        if self.sets and self.mandatory is not None:
            raise ValueError(
                f"parameter '{self.name}': use either 'mandatory' or 'sets', not both"
            )
        return self

    @property
    def effective_sets(self) -> dict[str, bool]:
        """Declared sets, or the single default set when only ``mandatory`` is given."""
        return self.sets or {DEFAULT_PARAMETER_SET: bool(self.mandatory)}

    def entries(self) -> list[ParameterEntry]:
        """Expand into one registry entry per parameter set."""
        return [
            ParameterEntry(
                name=self.name,
                type_name=self.type,
                parameter_set=set_name,
                mandatory=mandatory,
            )
            for set_name, mandatory in self.effective_sets.items()
        ]


class CommandSpec(BaseModel):
    """One row of the command table."""

    model_config = {"extra": "forbid"}

    primary: list[str] = Field(
        default_factory=list,
        description="Primary parameter names; each must be mandatory in some set",
    )
    parameters: list[ParameterSpec] = Field(default_factory=list)

    def entries(self) -> list[ParameterEntry]:
        return [entry for spec in self.parameters for entry in spec.entries()]


# =============================================================================
# Sources
# =============================================================================


class RegistrySource(BaseModel):
    """Where declared parameters come from."""

    model_config = {"extra": "forbid"}

    source: Literal["table", "click"] = Field(
        default="table",
        description="table = manifest commands block, click = live click/typer app",
    )
    app: str | None = Field(
        default=None, description="'package.module:attr' of the click or typer app"
    )

    @model_validator(mode="after")
    def require_app_for_click(self) -> RegistrySource:
        if self.source == "click" and not self.app:
            raise ValueError("registry.app is required when registry.source is 'click'")
        return self


class HelpSource(BaseModel):
    """Where help records come from."""

    model_config = {"extra": "forbid"}

    path: str = Field(
        default="docs/help",
        description="Directory of per-command help files, or a single bundle file",
    )


# =============================================================================
# Manifest
# =============================================================================


class Manifest(BaseModel):
    """Validated ``helpparity.yaml``."""

    model_config = {"extra": "forbid"}

    registry: RegistrySource = Field(default_factory=RegistrySource)
    help: HelpSource = Field(default_factory=HelpSource)
    settings: dict[str, Any] = Field(
        default_factory=dict, description="Validator settings overrides"
    )
    commands: dict[str, CommandSpec] = Field(default_factory=dict)

    _base_dir: Path = PrivateAttr(default_factory=Path.cwd)

    @model_validator(mode="after")
    def unique_command_names(self) -> Manifest:
        seen: dict[str, str] = {}
        for name in self.commands:
            key = name.casefold()
            if key in seen:
                raise ValueError(f"duplicate command '{name}' (already listed as '{seen[key]}')")
            seen[key] = name
        return self

    @property
    def base_dir(self) -> Path:
        """Directory relative paths in the manifest resolve against."""
        return self._base_dir

    def with_base_dir(self, base_dir: Path) -> Manifest:
        self._base_dir = base_dir
        return self

    @property
    def help_path(self) -> Path:
        path = Path(self.help.path).expanduser()
        return path if path.is_absolute() else self.base_dir / path

    def find_command(self, name: str) -> tuple[str, CommandSpec] | None:
        """Case-insensitive lookup returning the registered spelling and spec."""
        if name in self.commands:
            return name, self.commands[name]
        key = name.casefold()
        for registered, spec in self.commands.items():
            if registered.casefold() == key:
                return registered, spec
        return None

    def requests(self, names: list[str] | None = None) -> list[ValidationRequest]:
        """Build validation requests for the named commands (all when None).

        Names missing from the manifest still produce a request with no
        primary parameters; the registry decides whether the command exists.
        """
        if not names:
            names = list(self.commands)
        requests = []
        for name in names:
            found = self.find_command(name)
            if found is None:
                requests.append(ValidationRequest(command_name=name))
            else:
                registered, spec = found
                requests.append(
                    ValidationRequest(
                        command_name=registered,
                        primary_parameter_names=frozenset(spec.primary),
                    )
                )
        return requests
