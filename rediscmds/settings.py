from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlparse

from .categories import category_from_string
from .commands import Command, commands_in, lookup_by_name
from .exceptions import SettingsError, UnknownCommandError

_SCHEMES = ("commands", "")
_BOOL_KEYS = ("readonly",)
_LIST_KEYS = ("disable",)
_TRUE_VALUES = (
    "1",
    "true",
)


def settings_url_parse(url: str) -> dict[str, Any]:
    """
    Parse a control settings string:

        commands://?disable=FLUSHALL,DebugCommand&readonly=1

    `disable` takes command keywords and category names, separated by commas.
    """
    parse_result = urlparse(url)
    if parse_result.scheme not in _SCHEMES:
        raise SettingsError(f"wrong settings scheme {parse_result.scheme}")
    params: dict[str, Any] = {"disable": frozenset(), "readonly": False}
    for key, value in parse_qsl(parse_result.query):
        key = key.lower()
        if key in _BOOL_KEYS:
            params[key] = value.lower() in _TRUE_VALUES
        elif key in _LIST_KEYS:
            params[key] = params[key] | _parse_commands(value)
        else:
            raise SettingsError(f"unknown settings parameter {key}")
    return params


def _parse_commands(value: str) -> frozenset[Command]:
    commands: set[Command] = set()
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            commands.add(lookup_by_name(item))
        except UnknownCommandError:
            commands.update(commands_in(category_from_string(item)))
    return frozenset(commands)
