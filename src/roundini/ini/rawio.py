# -*- encoding: utf-8 -*-
# @File   : rawio.py
# @Time   : 2024/11/03 15:02:39
# @Author : Kariko Lin

"""Bytes in, bytes out. Plus guessing what those bytes are."""

import logging
from codecs import BOM_UTF8

import chardet

from ..abstract import FileHandler
from .consts import CODEC_CONFIDENCE, DEFAULT_CODEC


class RawFile(FileHandler[bytes]):
    """Whole-file reads and writes that never raise on I/O errors."""

    def read(self) -> bytes:
        """Returns `b''` if the file is missing or unreadable."""
        try:
            with open(self._fn, 'rb') as fp:
                return fp.read()
        except FileNotFoundError:
            logging.info(f'"{self._fn}" not found, starting empty.')
        except OSError as e:
            logging.warning(f'Unable to read "{self._fn}", starting empty.'
                            f'\n  {e}')
        return b''

    def write(self, instance: bytes) -> bool:
        """Truncate, then write. `False` if the file can't be opened."""
        try:
            # `wb` shrinks the file before anything is written.
            with open(self._fn, 'wb') as fp:
                fp.write(instance)
        except OSError as e:
            logging.warning(f'Unable to write "{self._fn}", nothing saved.'
                            f'\n  {e}')
            return False
        return True


def decode_bytes(raw: bytes, encoding: str | None = None) -> tuple[str, str]:
    """Decode file content, returning the text and the codec used.

    With `encoding` given it is tried first. If that fails (or none
    given), try utf-8 (BOM aware), then ask chardet,
    and as a last resort latin-1, which never fails.
    """
    if encoding is not None:
        try:
            return raw.decode(encoding), encoding
        except (UnicodeDecodeError, LookupError) as e:
            logging.warning(f'Unable to decode as "{encoding}", guessing.'
                            f'\n  {e}')
    if raw.startswith(BOM_UTF8):
        # keep the BOM on save.
        return raw.decode('utf-8-sig'), 'utf-8-sig'
    try:
        return raw.decode(DEFAULT_CODEC), DEFAULT_CODEC
    except UnicodeDecodeError:
        pass

    codec = chardet.detect(raw)
    if codec['encoding'] is not None \
            and codec['confidence'] >= CODEC_CONFIDENCE:
        try:
            return raw.decode(codec['encoding']), codec['encoding']
        except (UnicodeDecodeError, LookupError):
            pass
    logging.warning('Unable to guess the encoding, using latin-1.')
    return raw.decode('latin-1'), 'latin-1'
