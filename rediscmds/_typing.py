from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, Union

if TYPE_CHECKING:  # pragma: no cover
    from .categories import Category
    from .commands import Command


Keyword = str
Token = bytes
Default = TypeVar("Default")

CommandOrCategory = Union["Command", "Category"]
