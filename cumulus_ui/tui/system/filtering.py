"""Substring filtering of candidate items."""

from __future__ import annotations

from typing import Sequence, TypeVar

from cumulus_ui.tui.system.models import Schema

T = TypeVar("T")


def matches(item: T, folded_query: str, schema: Schema[T]) -> bool:
    for value in schema.search_fields(item):
        if value and folded_query in str(value).casefold():
            return True
    return False


def filter_items(items: Sequence[T], query: str, schema: Schema[T]) -> Sequence[T]:
    """Return the items whose search fields contain ``query``, case-insensitively.

    An empty query returns ``items`` itself. Matching keeps the input order.
    """
    if not query:
        return items
    folded = query.casefold()
    return tuple(item for item in items if matches(item, folded, schema))
