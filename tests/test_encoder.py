import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from rediscmds.commands import Command, name_of
from rediscmds.encoder import encode, tokens


@pytest.mark.parametrize(
    ("command", "encoded"),
    (
        (Command.GET, b"GET"),
        (Command.CLIENT_KILL, b"CLIENT KILL"),
        (Command.CONFIG_RESETSTAT, b"CONFIG RESETSTAT"),
        (Command.SLOWLOG, b"SLOWLOG"),
    ),
)
def test_encode(command, encoded):
    assert encode(command) == encoded
    assert isinstance(encode(command), bytes)


def test_encode_client_kill_bytes():
    assert list(encode(Command.CLIENT_KILL)) == [ord(char) for char in "CLIENT KILL"]


@pytest.mark.parametrize("command", list(Command))
def test_encode_is_ascii_keyword(command):
    assert encode(command).decode("ascii") == name_of(command)


@pytest.mark.parametrize(
    ("command", "expected"),
    (
        (Command.GET, (b"GET",)),
        (Command.CLIENT_KILL, (b"CLIENT", b"KILL")),
        (Command.DEBUG_OBJECT, (b"DEBUG", b"OBJECT")),
        (Command.CONFIG_GET, (b"CONFIG", b"GET")),
    ),
)
def test_tokens(command, expected):
    assert tokens(command) == expected


def test_tokens_join_back_to_encoded():
    for command in Command:
        assert b" ".join(tokens(command)) == encode(command)


def test_encode_stable_between_threads():
    expected = {command: encode(command) for command in Command}

    def _encode_all():
        return {command: encode(command) for command in Command}

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: _encode_all(), range(32)))

    assert all(result == expected for result in results)


@pytest.mark.asyncio
async def test_encode_stable_between_tasks():
    async def _encode(command):
        await asyncio.sleep(0)
        return encode(command)

    results = await asyncio.gather(*[_encode(command) for command in list(Command) * 3])
    assert results == [encode(command) for command in list(Command) * 3]
