from itertools import combinations

import pytest

from rediscmds.categories import ALL_CATEGORIES, Category
from rediscmds.commands import (
    ALL,
    KEY_CMDS,
    PERSISTENT_CMDS,
    RETRY_SAFE_CMDS,
    SERVER_CMDS,
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
from rediscmds.exceptions import UnknownCommandError


def test_catalog_size():
    assert len(ALL) == 97
    assert len(KEY_CMDS) == 20
    assert len(SERVER_CMDS) == 23


def test_names_unique():
    for first, second in combinations(Command, 2):
        assert name_of(first) != name_of(second)


@pytest.mark.parametrize("command", list(Command))
def test_round_trip(command):
    assert lookup_by_name(name_of(command)) is command


@pytest.mark.parametrize("command", list(Command))
def test_categories_not_empty(command):
    categories = categories_of(command)
    assert categories
    assert categories <= ALL_CATEGORIES
    assert isinstance(categories, frozenset)


@pytest.mark.parametrize("command", list(Command))
def test_keyword_is_uppercase_ascii(command):
    keyword = name_of(command)
    assert keyword == keyword.upper()
    assert keyword.isascii()
    assert keyword == " ".join(keyword.split())
    assert command.name == keyword.replace(" ", "_")


def test_get():
    assert name_of(Command.GET) == "GET"
    assert has_category(Command.GET, Category.PULL)
    assert not has_category(Command.GET, Category.PUSH)


def test_getset_is_pull_and_push():
    assert name_of(Command.GETSET) == "GETSET"
    assert has_category(Command.GETSET, Category.PULL)
    assert has_category(Command.GETSET, Category.PUSH)


def test_client_kill():
    assert name_of(Command.CLIENT_KILL) == "CLIENT KILL"
    assert categories_of(Command.CLIENT_KILL) == {Category.CLIENT, Category.SERVER}


def test_lookup_unknown():
    with pytest.raises(UnknownCommandError) as excinfo:
        lookup_by_name("NOPE")

    assert isinstance(excinfo.value, KeyError)
    assert excinfo.value.name == "NOPE"
    assert str(excinfo.value) == "unknown command 'NOPE'"


def test_store_variant_is_persistent():
    assert has_category(Command.SDIFFSTORE, Category.PERSISTENT)
    assert not has_category(Command.SDIFF, Category.PERSISTENT)
    assert PERSISTENT_CMDS == {Command.SDIFFSTORE, Command.SINTERSTORE, Command.SUNIONSTORE}


@pytest.mark.parametrize(
    ("command", "categories"),
    (
        (Command.DEL, {Category.KEY}),
        (Command.APPEND, {Category.STRING}),
        (Command.BITOP, {Category.STRING, Category.BIT}),
        (Command.INCRBYFLOAT, {Category.COUNTER, Category.STRING}),
        (Command.GETBIT, {Category.PULL, Category.BIT, Category.STRING}),
        (Command.GETRANGE, {Category.PULL, Category.BULK, Category.STRING}),
        (Command.MSETNX, {Category.PUSH, Category.BULK, Category.STRING}),
        (Command.SETNX, {Category.PUSH, Category.EXPIRE, Category.STRING}),
        (Command.PSETEX, {Category.PUSH, Category.EXPIRE, Category.STRING}),
        (Command.HDEL, {Category.BULK, Category.HASH}),
        (Command.HVALS, {Category.PULL, Category.HASH}),
        (Command.HINCRBY, {Category.COUNTER, Category.HASH}),
        (Command.SMEMBERS, {Category.SET}),
        (Command.SUNIONSTORE, {Category.BULK, Category.PERSISTENT, Category.SET}),
        (Command.SELECT, {Category.CONNECTION}),
        (Command.SLOWLOG, {Category.SERVER}),
        (Command.CONFIG_GET, {Category.CONFIG, Category.SERVER}),
        (Command.DEBUG_SEGFAULT, {Category.DEBUG, Category.SERVER}),
        (Command.FLUSHDB, {Category.FLUSH, Category.SERVER}),
    ),
)
def test_categories(command, categories):
    assert categories_of(command) == categories
    assert command.categories == categories


def test_command_properties():
    assert Command.CLIENT_SETNAME.keyword == "CLIENT SETNAME"
    assert str(Command.CLIENT_SETNAME) == "CLIENT SETNAME"
    assert Command.HMGET.has_category(Category.BULK)
    assert not Command.HGET.has_category(Category.BULK)
    assert Command("DEBUG OBJECT") is Command.DEBUG_OBJECT


@pytest.mark.parametrize(
    ("name", "command"),
    (
        ("get", Command.GET),
        (b"GET", Command.GET),
        ("client kill", Command.CLIENT_KILL),
        ("  Client   Kill ", Command.CLIENT_KILL),
        (b"config\tget", Command.CONFIG_GET),
        ("SlowLog", Command.SLOWLOG),
    ),
)
def test_lookup_normalized(name, command):
    assert lookup_by_name(name) is command


@pytest.mark.parametrize(
    "name",
    (
        "",
        "   ",
        "CLIENTKILL",
        "CLIENT",
        "GET GET",
        b"\xff\xfe",
        "ΓΕΤ",
        "ſet",
        "ınfo",
        "CLIENT\u00a0KILL",
        "CLIENT\u3000KILL",
        "CLIENT KILL".encode("utf-16"),
        None,
        1,
    ),
)
def test_lookup_not_found(name):
    with pytest.raises(UnknownCommandError):
        lookup_by_name(name)


def test_lookup_default():
    assert lookup_by_name("NOPE", default=None) is None
    assert lookup_by_name("NOPE", Command.PING) is Command.PING
    assert lookup_by_name("PING", default=None) is Command.PING


def test_commands_in():
    assert commands_in(Category.PULL, Category.PUSH) == {Command.GETSET}
    assert commands_in(Category.BIT, Category.PUSH) == {Command.SETBIT}
    assert commands_in(Category.CLIENT) == {
        Command.CLIENT_KILL,
        Command.CLIENT_LIST,
        Command.CLIENT_GETNAME,
        Command.CLIENT_SETNAME,
    }
    assert commands_in(Category.FLUSH) < commands_in(Category.SERVER)
    assert commands_in() == ALL
    assert commands_in(Category.HASH, Category.SET) == frozenset()


def test_retry_safe():
    assert is_retry_safe(Command.GET)
    assert is_retry_safe(Command.HGETALL)
    assert not is_retry_safe(Command.GETSET)
    assert not is_retry_safe(Command.SET)
    assert not is_retry_safe(Command.PING)
    assert Command.GETSET not in RETRY_SAFE_CMDS
    assert all(command.has_category(Category.PULL) for command in RETRY_SAFE_CMDS)


def test_write():
    assert is_write(Command.SET)
    assert is_write(Command.INCR)
    assert is_write(Command.SINTERSTORE)
    assert is_write(Command.GETSET)
    assert not is_write(Command.GET)
    assert not is_write(Command.DEL)
    assert not WRITE_CMDS & RETRY_SAFE_CMDS


def test_catalog_is_read_only():
    with pytest.raises(AttributeError):
        Command.GET = "GOT"
    with pytest.raises(AttributeError):
        categories_of(Command.GET).add(Category.PUSH)
    assert name_of(Command.GET) == "GET"
