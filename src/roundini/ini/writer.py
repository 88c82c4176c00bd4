# -*- encoding: utf-8 -*-
# @File   : writer.py
# @Time   : 2024/11/03 00:47:22
# @Author : Kariko Lin

"""Turn (cached lines, current sections) back into INI text.

Two steps, both free of side effects on the document:

1. `reconcile()` walks the lines read from disk and decides what
   survives. Comments and invalid lines always do, pairs only if their
   key is still there, headers only if their section is still there.
   New keys go to the end of their section's block, new sections go to
   the end of file.
2. `render()` prints the result, taking care of blank lines.
"""

from collections.abc import Iterable, Mapping
from dataclasses import replace

from .consts import LineEnding, LineKind
from .model import IniLine, IniSection


class IniConsistencyError(Exception):
    """A section is marked as added but no longer exists."""
    pass


def _close_block(
    out: list[IniLine],
    anchor: int | None,
    section: IniSection,
    emitted: set[str]
) -> None:
    """Put added keys of `section` after its last pair or header.

    `anchor` is the index right after that line in `out`,
    or `None` for the root block when nothing of it was written yet.
    """
    fresh = [
        IniLine(LineKind.KEYVALUE, key, section[key])
        for key in section.added_keys
        if key in section and key not in emitted
    ]
    if not fresh:
        return
    emitted.update(i.content for i in fresh)
    if anchor is None:
        out.extend(fresh)
        return
    if anchor > 0 and out[anchor - 1].blank_after:
        # the blank line belongs after the block, not inside.
        out[anchor - 1].blank_after = False
        fresh[-1].blank_after = True
    out[anchor:anchor] = fresh


def reconcile(
    lines: Iterable[IniLine],
    root: IniSection,
    sections: Mapping[str, IniSection],
    added_sections: Iterable[str]
) -> list[IniLine]:
    """Merge the line cache with the current model into new lines.

    Raises:
        IniConsistencyError: some name in `added_sections`
            is missing from `sections`.
    """
    out: list[IniLine] = []
    # None is the root.
    saved: dict[str | None, set[str]] = {None: set()}
    name: str | None = None
    current: IniSection | None = root
    first_visit = True
    anchor: int | None = None

    for line in lines:
        match line.kind:
            case LineKind.SECTION:
                if current is not None and first_visit:
                    _close_block(out, anchor, current, saved[name])
                name = line.content
                current = sections.get(name)
                if current is None:
                    # removed. pairs below it go with it.
                    continue
                first_visit = name not in saved
                saved.setdefault(name, set())
                out.append(replace(line))
                anchor = len(out)
            case LineKind.KEYVALUE:
                if current is None or line.content not in current:
                    continue
                emitted = saved[name]
                if line.content in emitted:
                    continue
                emitted.add(line.content)
                out.append(replace(line, value=current[line.content]))
                anchor = len(out)
            case LineKind.COMMENT | LineKind.INVALID:
                out.append(replace(line))

    if current is not None and first_visit:
        _close_block(out, anchor, current, saved[name])

    for sect_name in added_sections:
        if sect_name not in sections:
            raise IniConsistencyError(
                f'[{sect_name}] is marked as added but not found.')
        if sect_name in saved:
            continue
        saved[sect_name] = set(sections[sect_name])
        out.append(IniLine(LineKind.SECTION, sect_name))
        out.extend(
            IniLine(LineKind.KEYVALUE, k, v)
            for k, v in sections[sect_name].items())
    return out


def _line2str(line: IniLine) -> str:
    match line.kind:
        case LineKind.SECTION:
            return f'[{line.content}]'
        case LineKind.KEYVALUE:
            return f'{line.content} = {line.value}'
        case _:
            return line.content


def render(
    lines: list[IniLine],
    line_ending: LineEnding = LineEnding.LF
) -> str:
    """Print lines as INI text.

    A header gets one blank line in front of it unless some blank line
    already follows the last non-comment line. That blank goes right
    after the non-comment line, so comments above a header stay with it.
    """
    if not lines:
        return ''
    chunks = ['\n']
    needs_gap = False
    gap_at = 0
    last = len(lines) - 1
    for idx, line in enumerate(lines):
        blank_after = line.blank_after and idx != last
        if line.kind == LineKind.SECTION and needs_gap:
            chunks.insert(gap_at, '\n')
        chunks.append(_line2str(line))
        chunks.append('\n\n' if blank_after else '\n')
        if blank_after:
            needs_gap = False
        elif line.kind != LineKind.COMMENT:
            needs_gap = True
            gap_at = len(chunks)
    ret = ''.join(chunks)
    if line_ending != LineEnding.LF:
        ret = ret.replace('\n', line_ending.value)
    return ret
