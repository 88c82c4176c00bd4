# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:20:41
# @Author : Kariko Lin

from enum import Enum


class LineKind(str, Enum):
    BLANK = 'blank'
    INVALID = 'invalid'
    SECTION = 'section'
    KEYVALUE = 'keyvalue'
    COMMENT = 'comment'


class LineEnding(str, Enum):
    CRLF = '\r\n'
    LF = '\n'
    CR = '\r'


# value is the set of recognized markers.
class CommentSign(str, Enum):
    BOTH = ';#'
    HASH = '#'
    SEMICOLON = ';'


DEFAULT_CODEC = 'utf-8'
# when chardet is less sure than this, fall back to latin-1.
CODEC_CONFIDENCE = 0.8
