"""Protocol definitions for helpparity adapters.

The checker only talks to these two interfaces, so any parameter registry
or help source can be validated without changing the rules.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from helpparity.domain.help import HelpRecord
    from helpparity.domain.parameters import ParameterDescriptor


@runtime_checkable
class RegistryAdapter(Protocol):
    """Source of a command's declared parameter contract."""

    def list_commands(self) -> list[str]:
        """Return all registered command names, sorted."""
        ...

    def list_parameters(self, command_name: str) -> list["ParameterDescriptor"]:
        """Return the command's parameters, deduplicated and sorted by name.

        Raises:
            CommandNotFoundError: If the command is not registered.
        """
        ...


@runtime_checkable
class DocumentationAdapter(Protocol):
    """Source of a command's help record."""

    def get_help(self, command_name: str) -> "HelpRecord":
        """Return the command's help record.

        Raises:
            HelpNotFoundError: If no documentation exists for the command.
        """
        ...
