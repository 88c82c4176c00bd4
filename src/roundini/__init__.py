# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 17:15:02
# @Author : Kariko Lin

import logging

from .ini import (
    CommentSign, IniConsistencyError, IniDocument, IniLine, IniOptions,
    IniSection, LineEnding, LineKind
)

__all__ = [
    'IniDocument', 'IniSection', 'IniLine', 'IniOptions',
    'CommentSign', 'LineEnding', 'LineKind', 'IniConsistencyError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
