# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 17:12:30
# @Author : Kariko Lin

from .consts import CommentSign, LineEnding, LineKind
from .document import IniDocument
from .model import IniLine, IniOptions, IniSection
from .parser import load_lines, parse_line, trim
from .writer import IniConsistencyError, reconcile, render
