# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 21:31:56
# @Author : Kariko Lin

"""
Plain INI structures: one classified line, one section, and the options.

Nothing here touches files. See `ini.document` for the whole thing.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Iterator

from .consts import CommentSign, LineEnding, LineKind


@dataclass(kw_only=True)
class IniOptions:
    line_ending: LineEnding = LineEnding.LF
    comment_sign: CommentSign = CommentSign.BOTH
    # None means "guess it", see `rawio.decode_bytes`.
    encoding: str | None = None


@dataclass
class IniLine:
    """One physical line, either read from the source or made up on save.

    `content` means different things per `kind`:
    section name, key, comment text, or the raw invalid text.
    `value` is only meaningful for `LineKind.KEYVALUE`.
    """
    kind: LineKind
    content: str = ''
    value: str = ''
    # one or more blank lines followed. never a count.
    blank_after: bool = False


class IniSection(MutableMapping[str, str]):
    """Key-value pairs of one section, plus keys added since last save.

    `self[key]` never creates anything and raises `KeyError` on miss,
    while `self.setdefault(key)` does create (with an empty value).
    Any key that wasn't there before gets remembered in `added_keys`
    so that the writer knows it has no line on disk yet.
    """

    def __init__(self, name: str | None = None) -> None:
        # None stands for the root section (pairs before any header).
        self._name = name
        self._data: dict[str, str] = {}
        # dict as an ordered set.
        self._added: dict[str, None] = {}

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        if key not in self._data:
            self._added[key] = None
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._added.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return '<root>' if self._name is None else f'[{self._name}]'

    def __repr__(self) -> str:
        return '%s { .cnt = %d, .added = %d }' % (
            self, len(self._data), len(self._added))

    @property
    def name(self) -> str | None:
        """`None` for the root section."""
        return self._name

    def setdefault(self, key: str, default: str = '') -> str:
        if key not in self._data:
            self[key] = default
        return self._data[key]

    def remove(self, key: str) -> None:
        """Like `del self[key]`, but quietly ignores missing keys."""
        if key in self._data:
            del self[key]

    @property
    def added_keys(self) -> list[str]:
        """Keys created in memory since the last load or save."""
        return list(self._added)

    def _load(self, key: str, value: str) -> None:
        """for the loader: pairs read from disk are not "added"."""
        self._data[key] = value

    def _mark_saved(self) -> None:
        self._added.clear()
