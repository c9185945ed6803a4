class CommandError(Exception):
    pass


class UnknownCommandError(CommandError, KeyError):
    """Raised if a keyword is not a member of the catalog"""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown command {self.name!r}"


class UnknownCategoryError(CommandError, KeyError):
    """Raised if a category alias does not match any tag"""

    def __str__(self) -> str:
        return f"unknown category {self.args[0]!r}"


class CommandDisabledError(CommandError):
    """Raised by CommandControl.check for a disabled (or, in read-only mode, writing) command"""

    def __init__(self, command):
        self.command = command
        super().__init__(f"command {command} is disabled")


class SettingsError(CommandError):
    """Wrong settings string"""
