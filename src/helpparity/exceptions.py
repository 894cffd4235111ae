"""Exception hierarchy for helpparity."""


class HelpParityError(Exception):
    """Base exception for helpparity."""


class ConfigError(HelpParityError):
    """Invalid or missing configuration (manifest, settings, help files)."""


class AdapterError(HelpParityError):
    """A registry or documentation adapter could not serve a command."""

    def __init__(self, command_name: str, message: str | None = None):
        super().__init__(message or f"{type(self).__name__}: {command_name}")
        self.command_name = command_name


class CommandNotFoundError(AdapterError):
    """Command name is not registered with the registry adapter."""

    def __init__(self, command_name: str):
        super().__init__(command_name, f"Command not found: {command_name}")


class HelpNotFoundError(AdapterError):
    """No help record exists for the command."""

    def __init__(self, command_name: str):
        super().__init__(command_name, f"No help record for command: {command_name}")
