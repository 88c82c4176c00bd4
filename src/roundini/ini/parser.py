# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 22:05:17
# @Author : Kariko Lin

"""Line classifier and the loader built on it.

Every physical line ends up as exactly one of:

    ```ini
    ; comment (or `# comment`, see `CommentSign`)
    [section]
    key = value
    whatever else, kept as invalid text

    ```

and blank lines, which are folded into `IniLine.blank_after`
of the line before them.
"""

from .consts import CommentSign, LineKind
from .model import IniLine, IniSection


def trim(text: str) -> str:
    """Strip ASCII spaces on both ends. Tabs are content."""
    return text.strip(' ')


def parse_line(
    buf: str, offset: int,
    markers: str = CommentSign.BOTH.value
) -> tuple[IniLine, int]:
    """Classify the line starting at `offset`.

    Returns the line and the offset right after its `\\n`
    (or `len(buf)` at the end of buffer).
    """
    end = buf.find('\n', offset)
    if end == -1:
        end = len(buf)
    text = trim(buf[offset:end].replace('\r', ''))
    nxt = end + 1 if end < len(buf) else end

    if not text:
        return IniLine(LineKind.BLANK), nxt
    if text[0] in markers:
        return IniLine(LineKind.COMMENT, text), nxt
    if text[0] == '[':
        # `[sect` without `]` is still a header.
        name = text[1:].split(']', 1)[0]
        return IniLine(LineKind.SECTION, trim(name)), nxt
    if '=' in text:
        key, val = text.split('=', 1)
        return IniLine(LineKind.KEYVALUE, trim(key), trim(val)), nxt
    return IniLine(LineKind.INVALID, text), nxt


def load_lines(
    buf: str,
    markers: str = CommentSign.BOTH.value
) -> tuple[list[IniLine], IniSection, dict[str, IniSection]]:
    """Classify the whole buffer.

    Returns the line cache (without blank lines), the root section
    and the named sections in order of first appearance.
    """
    lines: list[IniLine] = []
    root = IniSection()
    sections: dict[str, IniSection] = {}
    this_sect = root
    offset = 0
    while offset < len(buf):
        line, offset = parse_line(buf, offset, markers)
        match line.kind:
            case LineKind.BLANK:
                # leading blanks have nobody to attach to.
                if lines:
                    lines[-1].blank_after = True
                continue
            case LineKind.SECTION:
                this_sect = sections.setdefault(
                    line.content, IniSection(line.content))
            case LineKind.KEYVALUE:
                # last one wins.
                this_sect._load(line.content, line.value)
        lines.append(line)
    return lines, root, sections
