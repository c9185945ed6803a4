from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from .commands import Command

if TYPE_CHECKING:  # pragma: no cover
    from ._typing import Token

_ENCODED: Mapping[Command, bytes] = MappingProxyType({cmd: cmd.value.encode("ascii") for cmd in Command})
_TOKENS: Mapping[Command, tuple[Token, ...]] = MappingProxyType(
    {cmd: tuple(word.encode("ascii") for word in cmd.value.split()) for cmd in Command}
)


def encode(command: Command) -> bytes:
    """
    Bytes of the command keyword as they go into the request array.
    Nothing is quoted or length-prefixed here: framing belongs to the transport.
    """
    return _ENCODED[command]


def tokens(command: Command) -> tuple[Token, ...]:
    """
    The keyword split into words: (b"CLIENT", b"KILL") for CLIENT_KILL, (b"GET",) for GET.
    For transports that send every word as its own array element.
    """
    return _TOKENS[command]
