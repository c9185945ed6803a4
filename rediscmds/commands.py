from __future__ import annotations

from enum import Enum, unique
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from .categories import Category, with_parents
from .exceptions import UnknownCommandError

if TYPE_CHECKING:  # pragma: no cover
    from ._typing import Default, Keyword

_missing = object()


@unique
class Command(Enum):
    # keys
    DEL = "DEL"  # delete a key: key [key ...]
    DUMP = "DUMP"  # serialized value stored at key: key
    EXISTS = "EXISTS"  # determine if a key exists: key
    EXPIRE = "EXPIRE"  # set a key's time to live in seconds: key seconds
    EXPIREAT = "EXPIREAT"  # set the expiration as a unix timestamp: key timestamp
    KEYS = "KEYS"  # find all keys matching the pattern: pattern
    MIGRATE = "MIGRATE"  # transfer a key to another instance: host port key destination-db timeout
    MOVE = "MOVE"  # move a key to another database: key db
    OBJECT = "OBJECT"  # inspect the internals of redis objects: subcommand [arguments ...]
    PERSIST = "PERSIST"  # remove the expiration from a key: key
    PEXPIRE = "PEXPIRE"  # set a key's time to live in milliseconds: key milliseconds
    PEXPIREAT = "PEXPIREAT"  # set the expiration as a unix timestamp in ms: key milliseconds-timestamp
    PTTL = "PTTL"  # time to live in milliseconds: key
    RANDOMKEY = "RANDOMKEY"  # random key from the keyspace
    RENAME = "RENAME"  # rename a key: key newkey
    RENAMENX = "RENAMENX"  # rename only if newkey does not exist: key newkey
    RESTORE = "RESTORE"  # create a key from a DUMP value: key ttl serialized-value
    SORT = "SORT"  # sort a list, set or sorted set: key [BY pattern] [LIMIT offset count] [GET pattern ...] [STORE dst]
    TTL = "TTL"  # time to live in seconds: key
    TYPE = "TYPE"  # type stored at key: key

    # strings
    APPEND = "APPEND"  # append a value to a key: key value
    BITCOUNT = "BITCOUNT"  # count set bits: key [start end]
    BITOP = "BITOP"  # bitwise operation between strings: operation destkey key [key ...]
    DECR = "DECR"  # decrement by one: key
    DECRBY = "DECRBY"  # decrement by the given number: key decrement
    GET = "GET"  # value of a key: key
    GETBIT = "GETBIT"  # bit value at offset: key offset
    GETRANGE = "GETRANGE"  # substring of the value: key start end
    GETSET = "GETSET"  # set a value and return the old one: key value
    INCR = "INCR"  # increment by one: key
    INCRBY = "INCRBY"  # increment by the given amount: key increment
    INCRBYFLOAT = "INCRBYFLOAT"  # increment the float value: key increment
    MGET = "MGET"  # values of all given keys: key [key ...]
    MSET = "MSET"  # set multiple keys: key value [key value ...]
    MSETNX = "MSETNX"  # set multiple keys only if none exist: key value [key value ...]
    PSETEX = "PSETEX"  # set value and expiration in milliseconds: key milliseconds value
    SET = "SET"  # set the string value: key value [EX seconds] [PX milliseconds] [NX|XX]
    SETBIT = "SETBIT"  # set or clear the bit at offset: key offset value
    SETEX = "SETEX"  # set value and expiration in seconds: key seconds value
    SETNX = "SETNX"  # set only if the key does not exist: key value
    SETRANGE = "SETRANGE"  # overwrite part of a string: key offset value
    STRLEN = "STRLEN"  # length of the value: key

    # hashes
    HDEL = "HDEL"  # delete hash fields: key field [field ...]
    HEXISTS = "HEXISTS"  # determine if a field exists: key field
    HGET = "HGET"  # value of a field: key field
    HGETALL = "HGETALL"  # all fields and values: key
    HINCRBY = "HINCRBY"  # increment a field by the given number: key field increment
    HINCRBYFLOAT = "HINCRBYFLOAT"  # increment a float field: key field increment
    HKEYS = "HKEYS"  # all fields: key
    HLEN = "HLEN"  # number of fields: key
    HMGET = "HMGET"  # values of the given fields: key field [field ...]
    HMSET = "HMSET"  # set multiple fields: key field value [field value ...]
    HSET = "HSET"  # set a field: key field value
    HSETNX = "HSETNX"  # set a field only if it does not exist: key field value
    HVALS = "HVALS"  # all values: key

    # sets
    SADD = "SADD"  # add members: key member [member ...]
    SCARD = "SCARD"  # number of members: key
    SDIFF = "SDIFF"  # subtract sets: key [key ...]
    SDIFFSTORE = "SDIFFSTORE"  # subtract sets and store: destination key [key ...]
    SINTER = "SINTER"  # intersect sets: key [key ...]
    SINTERSTORE = "SINTERSTORE"  # intersect sets and store: destination key [key ...]
    SISMEMBER = "SISMEMBER"  # determine membership: key member
    SMEMBERS = "SMEMBERS"  # all members: key
    SMOVE = "SMOVE"  # move a member to another set: source destination member
    SPOP = "SPOP"  # remove and return a random member: key
    SRANDMEMBER = "SRANDMEMBER"  # random members: key [count]
    SREM = "SREM"  # remove members: key member [member ...]
    SUNION = "SUNION"  # add sets: key [key ...]
    SUNIONSTORE = "SUNIONSTORE"  # add sets and store: destination key [key ...]

    # connection
    AUTH = "AUTH"  # authenticate to the server
    ECHO = "ECHO"  # echo the given string
    PING = "PING"  # ping the server
    QUIT = "QUIT"  # close the connection
    SELECT = "SELECT"  # change the selected database

    # server
    BGREWRITEAOF = "BGREWRITEAOF"  # asynchronously rewrite the append-only file
    BGSAVE = "BGSAVE"  # asynchronously save the dataset to disk
    CLIENT_KILL = "CLIENT KILL"  # kill the connection of a client: ip:port
    CLIENT_LIST = "CLIENT LIST"  # list client connections
    CLIENT_GETNAME = "CLIENT GETNAME"  # current connection name
    CLIENT_SETNAME = "CLIENT SETNAME"  # set the current connection name
    CONFIG_GET = "CONFIG GET"  # value of a configuration parameter: parameter
    CONFIG_SET = "CONFIG SET"  # set a configuration parameter: parameter value
    CONFIG_RESETSTAT = "CONFIG RESETSTAT"  # reset the stats returned by INFO
    DBSIZE = "DBSIZE"  # number of keys in the selected database
    DEBUG_OBJECT = "DEBUG OBJECT"  # debugging information about a key: key
    DEBUG_SEGFAULT = "DEBUG SEGFAULT"  # make the server crash
    FLUSHALL = "FLUSHALL"  # remove all keys from all databases
    FLUSHDB = "FLUSHDB"  # remove all keys from the current database
    INFO = "INFO"  # server information and statistics: [section]
    LASTSAVE = "LASTSAVE"  # unix time of the last successful save
    MONITOR = "MONITOR"  # listen for all requests in real time
    SAVE = "SAVE"  # synchronously save the dataset to disk
    SHUTDOWN = "SHUTDOWN"  # save and shut down the server: [NOSAVE] [SAVE]
    SLAVEOF = "SLAVEOF"  # replicate another instance or promote to master: host port
    SLOWLOG = "SLOWLOG"  # manage the slow queries log: subcommand [argument]
    SYNC = "SYNC"  # internal command used for replication
    TIME = "TIME"  # current server time

    @property
    def keyword(self) -> Keyword:
        return self.value

    @property
    def categories(self) -> frozenset[Category]:
        return _CATEGORIES[self]

    def has_category(self, category: Category) -> bool:
        return category in _CATEGORIES[self]

    def __str__(self) -> str:
        return self.value


_K, _S, _B, _C = Category.KEY, Category.STRING, Category.BIT, Category.COUNTER
_PULL, _PUSH, _BULK, _EXP = Category.PULL, Category.PUSH, Category.BULK, Category.EXPIRE
_H, _SET, _STORE = Category.HASH, Category.SET, Category.PERSISTENT

_TAGS: dict[Command, tuple[Category, ...]] = {
    Command.DEL: (_K,),
    Command.DUMP: (_K,),
    Command.EXISTS: (_K,),
    Command.EXPIRE: (_K,),
    Command.EXPIREAT: (_K,),
    Command.KEYS: (_K,),
    Command.MIGRATE: (_K,),
    Command.MOVE: (_K,),
    Command.OBJECT: (_K,),
    Command.PERSIST: (_K,),
    Command.PEXPIRE: (_K,),
    Command.PEXPIREAT: (_K,),
    Command.PTTL: (_K,),
    Command.RANDOMKEY: (_K,),
    Command.RENAME: (_K,),
    Command.RENAMENX: (_K,),
    Command.RESTORE: (_K,),
    Command.SORT: (_K,),
    Command.TTL: (_K,),
    Command.TYPE: (_K,),
    Command.APPEND: (_S,),
    Command.BITCOUNT: (_S, _B),
    Command.BITOP: (_S, _B),
    Command.DECR: (_C, _S),
    Command.DECRBY: (_C, _S),
    Command.GET: (_PULL, _S),
    Command.GETBIT: (_PULL, _B, _S),
    Command.GETRANGE: (_PULL, _BULK, _S),
    Command.GETSET: (_PULL, _PUSH, _S),
    Command.INCR: (_C, _S),
    Command.INCRBY: (_C, _S),
    Command.INCRBYFLOAT: (_C, _S),
    Command.MGET: (_PULL, _BULK, _S),
    Command.MSET: (_PUSH, _BULK, _S),
    Command.MSETNX: (_PUSH, _BULK, _S),
    Command.PSETEX: (_PUSH, _EXP, _S),
    Command.SET: (_PUSH, _S),
    Command.SETBIT: (_PUSH, _B, _S),
    Command.SETEX: (_PUSH, _EXP, _S),
    Command.SETNX: (_PUSH, _EXP, _S),
    Command.SETRANGE: (_PUSH, _BULK, _S),
    Command.STRLEN: (_S,),
    Command.HDEL: (_BULK, _H),
    Command.HEXISTS: (_H,),
    Command.HGET: (_PULL, _H),
    Command.HGETALL: (_PULL, _BULK, _H),
    Command.HINCRBY: (_C, _H),
    Command.HINCRBYFLOAT: (_C, _H),
    Command.HKEYS: (_BULK, _H),
    Command.HLEN: (_H,),
    Command.HMGET: (_BULK, _PULL, _H),
    Command.HMSET: (_BULK, _PUSH, _H),
    Command.HSET: (_PUSH, _H),
    Command.HSETNX: (_PUSH, _H),
    Command.HVALS: (_PULL, _H),
    Command.SADD: (_BULK, _SET),
    Command.SCARD: (_SET,),
    Command.SDIFF: (_SET,),
    Command.SDIFFSTORE: (_STORE, _SET),
    Command.SINTER: (_SET,),
    Command.SINTERSTORE: (_STORE, _SET),
    Command.SISMEMBER: (_SET,),
    Command.SMEMBERS: (_SET,),
    Command.SMOVE: (_SET,),
    Command.SPOP: (_SET,),
    Command.SRANDMEMBER: (_BULK, _SET),
    Command.SREM: (_BULK, _SET),
    Command.SUNION: (_BULK, _SET),
    Command.SUNIONSTORE: (_BULK, _STORE, _SET),
    Command.AUTH: (Category.CONNECTION,),
    Command.ECHO: (Category.CONNECTION,),
    Command.PING: (Category.CONNECTION,),
    Command.QUIT: (Category.CONNECTION,),
    Command.SELECT: (Category.CONNECTION,),
    Command.BGREWRITEAOF: (Category.SERVER,),
    Command.BGSAVE: (Category.SERVER,),
    Command.CLIENT_KILL: (Category.CLIENT,),
    Command.CLIENT_LIST: (Category.CLIENT,),
    Command.CLIENT_GETNAME: (Category.CLIENT,),
    Command.CLIENT_SETNAME: (Category.CLIENT,),
    Command.CONFIG_GET: (Category.CONFIG,),
    Command.CONFIG_SET: (Category.CONFIG,),
    Command.CONFIG_RESETSTAT: (Category.CONFIG,),
    Command.DBSIZE: (Category.SERVER,),
    Command.DEBUG_OBJECT: (Category.DEBUG,),
    Command.DEBUG_SEGFAULT: (Category.DEBUG,),
    Command.FLUSHALL: (Category.FLUSH,),
    Command.FLUSHDB: (Category.FLUSH,),
    Command.INFO: (Category.SERVER,),
    Command.LASTSAVE: (Category.SERVER,),
    Command.MONITOR: (Category.SERVER,),
    Command.SAVE: (Category.SERVER,),
    Command.SHUTDOWN: (Category.SERVER,),
    Command.SLAVEOF: (Category.SERVER,),
    Command.SLOWLOG: (Category.SERVER,),
    Command.SYNC: (Category.SERVER,),
    Command.TIME: (Category.SERVER,),
}

# sub-tags (CLIENT, CONFIG, ...) carry SERVER as well
_CATEGORIES: Mapping[Command, frozenset[Category]] = MappingProxyType(
    {command: with_parents(tags) for command, tags in _TAGS.items()}
)
del _TAGS

_BY_KEYWORD: Mapping[str, Command] = MappingProxyType({" ".join(cmd.value.split()).upper(): cmd for cmd in Command})


def name_of(command: Command) -> Keyword:
    return command.value


def categories_of(command: Command) -> frozenset[Category]:
    return _CATEGORIES[command]


def has_category(command: Command, category: Category) -> bool:
    return category in _CATEGORIES[command]


def lookup_by_name(name: str | bytes, default: Default = _missing) -> Command | Default:  # type: ignore[assignment]
    """
    Find a command by its protocol keyword.

    The exact keyword wins; otherwise the name is matched case-insensitively with
    whitespace collapsed ("client  kill" -> CLIENT_KILL), the way the server reads it.
    Keywords are ASCII: any other name is not found.
    Raise UnknownCommandError if nothing matches and no default is given.
    """
    command = None
    if isinstance(name, bytes):
        name = name.decode("ascii", errors="replace")
    if isinstance(name, str) and name.isascii():
        command = _BY_KEYWORD.get(name) or _BY_KEYWORD.get(" ".join(name.split()).upper())
    if command is not None:
        return command
    if default is _missing:
        raise UnknownCommandError(name)
    return default


def commands_in(*categories: Category) -> frozenset[Command]:
    """Commands that carry every given category"""
    wanted = set(categories)
    return frozenset(cmd for cmd, tags in _CATEGORIES.items() if wanted <= tags)


def is_retry_safe(command: Command) -> bool:
    tags = _CATEGORIES[command]
    return Category.PULL in tags and Category.PUSH not in tags


def is_write(command: Command) -> bool:
    return not _CATEGORIES[command].isdisjoint(WRITE_CATEGORIES)


WRITE_CATEGORIES = frozenset({Category.PUSH, Category.COUNTER, Category.PERSISTENT})

ALL = frozenset(Command)
KEY_CMDS = commands_in(Category.KEY)
STRING_CMDS = commands_in(Category.STRING)
BIT_CMDS = commands_in(Category.BIT)
COUNTER_CMDS = commands_in(Category.COUNTER)
PULL_CMDS = commands_in(Category.PULL)
PUSH_CMDS = commands_in(Category.PUSH)
BULK_CMDS = commands_in(Category.BULK)
EXPIRE_CMDS = commands_in(Category.EXPIRE)
HASH_CMDS = commands_in(Category.HASH)
SET_CMDS = commands_in(Category.SET)
PERSISTENT_CMDS = commands_in(Category.PERSISTENT)
CONNECTION_CMDS = commands_in(Category.CONNECTION)
SERVER_CMDS = commands_in(Category.SERVER)
RETRY_SAFE_CMDS = frozenset(cmd for cmd in Command if is_retry_safe(cmd))
WRITE_CMDS = frozenset(cmd for cmd in Command if is_write(cmd))
