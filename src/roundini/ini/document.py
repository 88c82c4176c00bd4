# -*- encoding: utf-8 -*-
# @File   : document.py
# @Time   : 2024/11/03 16:40:55
# @Author : Kariko Lin

"""
INI document that remembers how it looked on disk.

    ```python
    doc = IniDocument('settings.ini')
    doc.setdefault('window')['width'] = '800'  # creates if missing
    doc['window']['height']                    # KeyError if missing
    doc.remove('legacy')                       # pairs move to doc.root
    doc.save()
    ```

Comments, invalid lines, blank lines and the order of everything
survive `save()`, unless the model says otherwise.
"""

import logging
import warnings
from collections.abc import Mapping, MutableMapping
from dataclasses import asdict
from os import PathLike
from typing import Iterator

import yaml

from .model import IniLine, IniOptions, IniSection
from .parser import load_lines
from .rawio import RawFile, decode_bytes
from .writer import reconcile, render


class IniDocument(MutableMapping[str, IniSection]):
    """Named sections of one INI file, plus the root section.

    The root section (pairs before the first header) is `self.root`.
    It is never part of iteration, and can't be removed.

    Not thread safe. One document, one user at a time.
    """

    def __init__(
        self,
        path: str | PathLike[str] | None = None, *,
        options: IniOptions | None = None
    ) -> None:
        self.options = options if options is not None else IniOptions()
        self._reset()
        self._path: str | PathLike[str] | None = None
        if path is not None:
            self.open(path)

    def _reset(self) -> None:
        self._root = IniSection()
        self._sections: dict[str, IniSection] = {}
        # dict as an ordered set.
        self._added: dict[str, None] = {}
        self._lines: list[IniLine] = []
        self._codec = self.options.encoding

    # --- accessors ---

    @property
    def root(self) -> IniSection:
        """Pairs not belonging to any section."""
        return self._root

    @property
    def path(self) -> str | PathLike[str] | None:
        return self._path

    @property
    def encoding(self) -> str | None:
        """Codec of the last load, or the forced one."""
        return self._codec

    @property
    def added_sections(self) -> list[str]:
        """Sections created in memory since the last load or save."""
        return list(self._added)

    @property
    def lines(self) -> tuple[IniLine, ...]:
        """Line cache of the last load or save. Read only."""
        return tuple(self._lines)

    def __getitem__(self, key: str) -> IniSection:
        return self._sections[key]

    def __setitem__(self, key: str, value: Mapping[str, str]) -> None:
        """Replace all pairs of section `key`, creating it if needed."""
        sect = self.setdefault(key)
        if value is sect:
            return
        pairs = dict(value)
        for k in list(sect):
            if k not in pairs:
                sect.remove(k)
        sect.update(pairs)

    def __delitem__(self, key: str) -> None:
        if key not in self._sections:
            raise KeyError(key)
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __repr__(self) -> str:
        return '<IniDocument "%s" { .sections = %d, .lines = %d }>' % (
            self._path, len(self._sections), len(self._lines))

    def setdefault(
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        """Get section `key`, creating (and marking as added) on miss.

        `default` pairs only go in when the section is created here.
        """
        if key not in self._sections:
            self._sections[key] = IniSection(key)
            self._added[key] = None
            if default:
                self._sections[key].update(default)
        return self._sections[key]

    def remove(self, key: str, discard_keys: bool = False) -> None:
        """Remove section `key`. Missing sections are ignored.

        Unless `discard_keys`, its pairs move into `self.root`,
        where a pair the root already has is kept as is.
        """
        if key not in self._sections:
            return
        sect = self._sections.pop(key)
        self._added.pop(key, None)
        if discard_keys:
            return
        for k, v in sect.items():
            if k in self._root:
                warnings.warn(
                    f'"{k}" of [{key}] already exists in root section, '
                    f'keeping "{self._root[k]}" over "{v}".')
                continue
            self._root[k] = v

    # --- file ---

    def open(self, path: str | PathLike[str]) -> None:
        """Drop everything in memory and load `path`.

        A missing or unreadable file gives an empty document.
        """
        self._reset()
        self._path = path
        text, self._codec = decode_bytes(
            RawFile(path).read(), self.options.encoding)
        self._lines, self._root, self._sections = load_lines(
            text, self.options.comment_sign.value)
        logging.debug(f'Loaded "{path}": {len(self._sections)} sections, '
                      f'{len(self._lines)} lines.')

    def reopen(self) -> None:
        if self._path is not None:
            self.open(self._path)

    def save(self, path: str | PathLike[str] | None = None) -> bool:
        """Write the document back, keeping the original layout.

        With `path` given, the document is bound to it from now on.
        Returns `False` (and keeps every "added" mark) if nothing could
        be written.

        Raises:
            IniConsistencyError: the added-sections record is broken.
        """
        if path is not None:
            self._path = path
        if self._path is None:
            logging.warning('No path bound to this document, nothing saved.')
            return False

        lines = reconcile(
            self._lines, self._root, self._sections, self._added)
        text = render(lines, self.options.line_ending)
        codec = self._codec or 'utf-8'
        try:
            raw = text.encode(codec)
        except UnicodeEncodeError:
            logging.warning(f'"{codec}" can\'t hold every value of '
                            f'"{self._path}", saving as utf-8 instead.')
            codec, raw = 'utf-8', text.encode('utf-8')
        if not RawFile(self._path).write(raw):
            return False
        self._codec = codec

        # what is on disk now is the new baseline.
        if lines:
            lines[-1].blank_after = False
        self._lines = lines
        self._added.clear()
        self._root._mark_saved()
        for sect in self._sections.values():
            sect._mark_saved()
        return True

    # --- debug ---

    @staticmethod
    def __sect2dict(sect: IniSection) -> dict[str, object]:
        return {'pairs': dict(sect), 'added': sect.added_keys}

    def dump(self) -> str:
        """YAML snapshot of the line cache and the model, for debugging."""
        snapshot = {
            'path': None if self._path is None else str(self._path),
            'lines': [
                {**asdict(i), 'kind': i.kind.value} for i in self._lines
            ],
            'root': self.__sect2dict(self._root),
            'sections': {
                k: self.__sect2dict(v) for k, v in self._sections.items()
            },
            'added_sections': self.added_sections,
        }
        return yaml.safe_dump(
            snapshot, allow_unicode=True, sort_keys=False)
