from __future__ import annotations

from enum import Enum

from .exceptions import UnknownCategoryError


class Category(Enum):
    KEY = "KeyCommand"
    STRING = "StringCommand"
    BIT = "BitCommand"
    COUNTER = "CounterCommand"
    PULL = "PullCommand"
    PUSH = "PushCommand"
    BULK = "BulkCommand"
    EXPIRE = "ExpireCommand"
    HASH = "HashCommand"
    SET = "SetCommand"
    PERSISTENT = "PersistentCommand"

    CONNECTION = "ConnectionCommand"
    SERVER = "ServerCommand"
    CLIENT = "ClientCommand"
    CONFIG = "ConfigCommand"
    DEBUG = "DebugCommand"
    FLUSH = "FlushCommand"

    @property
    def tag_name(self) -> str:
        return self.value

    @property
    def parent(self) -> Category | None:
        return _PARENTS.get(self)

    def __str__(self) -> str:
        return self.value


_PARENTS = {
    Category.CLIENT: Category.SERVER,
    Category.CONFIG: Category.SERVER,
    Category.DEBUG: Category.SERVER,
    Category.FLUSH: Category.SERVER,
}

ALL_CATEGORIES = frozenset(Category)

_ALIASES = {category.name.lower(): category for category in Category}
_ALIASES.update({category.value.lower(): category for category in Category})


def with_parents(categories) -> frozenset[Category]:
    result = set()
    for category in categories:
        while category is not None:
            result.add(category)
            category = category.parent
    return frozenset(result)


def category_from_string(value: str) -> Category:
    """
    Resolve a category by member name ("flush", "FLUSH") or by tag name ("FlushCommand")
    """
    category = _ALIASES.get(value.strip().lower()) if value.isascii() else None
    if category is None:
        raise UnknownCategoryError(value)
    return category
