"""Core validation: filtering, rule checks and batch runs."""

from helpparity.core.checker import check_command, compare
from helpparity.core.filtering import exclude
from helpparity.core.runner import validate_commands

__all__ = ["check_command", "compare", "exclude", "validate_commands"]
