from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator

from .categories import Category
from .commands import ALL, Command, commands_in, is_write
from .exceptions import CommandDisabledError
from .settings import settings_url_parse

if TYPE_CHECKING:  # pragma: no cover
    from ._typing import CommandOrCategory

logger = logging.getLogger(__name__)


def _expand(items: tuple[CommandOrCategory, ...]) -> frozenset[Command]:
    if not items:
        return ALL
    commands: set[Command] = set()
    for item in items:
        if isinstance(item, Category):
            commands.update(commands_in(item))
        else:
            commands.add(item)
    return frozenset(commands)


class CommandControl:
    """
    Dispatch-time policy for a transport: which commands may be sent.

    Permanent changes (setup, disable/enable) are shared by every caller.
    Temporary ones live in a context variable, so a task that disables
    something for a while does not affect other tasks or threads.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.readonly = False
        self.__disable: frozenset[Command] = frozenset()
        # temporary (disabled, enabled) overlay on top of the shared set
        self.__temporary: ContextVar[tuple[frozenset[Command], frozenset[Command]]] = ContextVar(
            f"disable_{name}_{id(self)}", default=(frozenset(), frozenset())
        )

    def setup(self, settings_url: str) -> None:
        params = settings_url_parse(settings_url)
        self.readonly = params["readonly"]
        self.__disable = params["disable"]
        logger.debug("control %s: setup with %s", self.name, settings_url)

    @property
    def _disable(self) -> frozenset[Command]:
        disabled, enabled = self.__temporary.get()
        return (self.__disable | disabled) - enabled

    def _update(self, add: frozenset[Command], remove: frozenset[Command], temporary: bool) -> None:
        if not temporary:
            self.__disable = (self.__disable | add) - remove
            return
        disabled, enabled = self.__temporary.get()
        self.__temporary.set(((disabled | add) - remove, (enabled | remove) - add))

    def disable(self, *items: CommandOrCategory, temporary: bool = False) -> None:
        commands = _expand(items)
        self._update(add=commands, remove=frozenset(), temporary=temporary)
        logger.debug("control %s: disable %s", self.name, sorted(str(cmd) for cmd in commands))

    def enable(self, *items: CommandOrCategory, temporary: bool = False) -> None:
        commands = _expand(items)
        self._update(add=frozenset(), remove=commands, temporary=temporary)
        logger.debug("control %s: enable %s", self.name, sorted(str(cmd) for cmd in commands))

    @contextmanager
    def disabling(self, *items: CommandOrCategory) -> Iterator[None]:
        was = self.__temporary.get()
        self.disable(*items, temporary=True)
        try:
            yield
        finally:
            self.__temporary.set(was)

    def is_disable(self, *cmds: Command) -> bool:
        _disable = self._disable
        if not cmds:
            return bool(_disable) or self.readonly
        for cmd in cmds:
            if cmd in _disable or self.readonly and is_write(cmd):
                return True
        return False

    def is_enable(self, *cmds: Command) -> bool:
        return not self.is_disable(*cmds)

    @property
    def is_full_disable(self) -> bool:
        return self._disable == ALL

    def check(self, command: Command) -> Command:
        if self.is_disable(command):
            logger.info("control %s: refuse disabled command %s", self.name, command)
            raise CommandDisabledError(command)
        return command
