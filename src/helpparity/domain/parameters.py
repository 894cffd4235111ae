"""Parameter descriptors produced by registry adapters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class ParameterEntry:
    """One parameter as it appears in one parameter set of a command.

    Registries expose parameters per set; the same parameter shows up once
    for every set it belongs to.
    """

    name: str
    type_name: str
    parameter_set: str
    mandatory: bool = False


class ParameterDescriptor(BaseModel):
    """One parameter of one command, collapsed across its parameter sets."""

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1, description="Parameter name (case-insensitive)")
    type_name: str = Field(..., description="Canonical display name of the value type")
    parameter_sets: dict[str, bool] = Field(
        default_factory=dict,
        description="Parameter set name -> mandatory in that set",
    )

    @property
    def is_mandatory(self) -> bool:
        """True when the parameter is mandatory in at least one parameter set."""
        return any(self.parameter_sets.values())

    @property
    def key(self) -> str:
        """Case-folded name used for matching and ordering."""
        return self.name.casefold()


def collapse_parameters(entries: Iterable[ParameterEntry]) -> list[ParameterDescriptor]:
    """Deduplicate per-set entries into one descriptor per parameter.

    The first occurrence of a name (case-insensitive) fixes its spelling and
    type name. Later occurrences only contribute their set membership, so
    mandatoriness collapses to "mandatory in any set". Output is sorted by
    case-folded name.
    """
    first: dict[str, ParameterEntry] = {}
    sets: dict[str, dict[str, bool]] = {}
    for entry in entries:
        key = entry.name.casefold()
        if key not in first:
            first[key] = entry
            sets[key] = {}
        membership = sets[key]
        membership[entry.parameter_set] = membership.get(entry.parameter_set, False) or bool(
            entry.mandatory
        )

    return [
        ParameterDescriptor(
            name=first[key].name,
            type_name=first[key].type_name,
            parameter_sets=sets[key],
        )
        for key in sorted(first)
    ]


def find_parameter(
    parameters: Iterable[ParameterDescriptor], name: str
) -> ParameterDescriptor | None:
    """Case-insensitive lookup of a descriptor by name."""
    key = name.casefold()
    for parameter in parameters:
        if parameter.key == key:
            return parameter
    return None
