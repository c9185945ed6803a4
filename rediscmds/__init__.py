from .categories import ALL_CATEGORIES, Category, category_from_string
from .commands import (
    ALL,
    BULK_CMDS,
    PULL_CMDS,
    PUSH_CMDS,
    RETRY_SAFE_CMDS,
    WRITE_CMDS,
    Command,
    categories_of,
    commands_in,
    has_category,
    is_retry_safe,
    is_write,
    lookup_by_name,
    name_of,
)
from .control import CommandControl
from .encoder import encode, tokens
from .exceptions import (
    CommandDisabledError,
    CommandError,
    SettingsError,
    UnknownCategoryError,
    UnknownCommandError,
)
from .settings import settings_url_parse

# pylint: disable=invalid-name
default_control = CommandControl(name="default")
setup = default_control.setup
disable = default_control.disable
enable = default_control.enable
disabling = default_control.disabling
check = default_control.check


__all__ = [
    "default_control",
    "setup",
    "disable",
    "enable",
    "disabling",
    "check",
    "Command",
    "Category",
    "CommandControl",
    "ALL",
    "ALL_CATEGORIES",
    "BULK_CMDS",
    "PULL_CMDS",
    "PUSH_CMDS",
    "RETRY_SAFE_CMDS",
    "WRITE_CMDS",
    "name_of",
    "categories_of",
    "has_category",
    "lookup_by_name",
    "commands_in",
    "is_retry_safe",
    "is_write",
    "category_from_string",
    "encode",
    "tokens",
    "settings_url_parse",
    "CommandError",
    "CommandDisabledError",
    "SettingsError",
    "UnknownCategoryError",
    "UnknownCommandError",
]
