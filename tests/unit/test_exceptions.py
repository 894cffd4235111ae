"""Tests for exception hierarchy."""

import pytest

from helpparity.exceptions import (
    AdapterError,
    CommandNotFoundError,
    ConfigError,
    HelpNotFoundError,
    HelpParityError,
)


class TestExceptionHierarchy:
    def test_all_exceptions_inherit_from_base(self):
        for exc_class in (ConfigError, AdapterError, CommandNotFoundError, HelpNotFoundError):
            assert issubclass(exc_class, HelpParityError)

    def test_adapter_errors(self):
        assert issubclass(CommandNotFoundError, AdapterError)
        assert issubclass(HelpNotFoundError, AdapterError)
        assert not issubclass(ConfigError, AdapterError)


class TestMessages:
    def test_command_not_found(self):
        error = CommandNotFoundError("Invoke-Task")
        assert str(error) == "Command not found: Invoke-Task"
        assert error.command_name == "Invoke-Task"

    def test_help_not_found(self):
        error = HelpNotFoundError("Invoke-Task")
        assert str(error) == "No help record for command: Invoke-Task"

    def test_adapter_error_default_message(self):
        assert str(AdapterError("x")) == "AdapterError: x"

    def test_catchable_as_base(self):
        with pytest.raises(HelpParityError):
            raise CommandNotFoundError("x")
