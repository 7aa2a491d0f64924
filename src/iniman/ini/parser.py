# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/18 10:58:17

"""Text <-> `IniClass`.

The dialect read here is deliberately loose:

1. ALL whitespace of a line is dropped, even inside keys and values,
so `my key = a b` reads as `mykey=ab`.
2. `;` and `#` start comments, either on a whole line or after a value.
An inline marker right after a backslash (`\\;`, `\\#`) is literal,
and the backslash itself is consumed.
3. A value wrapped in ONE pair of double quotes loses that pair.
4. Pairs before the first `[section]` are discarded.

Writing does not escape anything, so a value like `a;b` is written
as is and will NOT read back the same (a `UserWarning` tells so).
"""

import logging
from io import StringIO, TextIOBase, TextIOWrapper
from os import PathLike
from warnings import warn

import chardet

from ..abstract import FileHandler
from .errors import InvalidInput, IniWriteError
from .model import IniClass

__all__ = ['COMMENT_MARKERS', 'parse_text', 'dump_text',
           'open_for_write', 'IniParser']

logger = logging.getLogger(__name__)

COMMENT_MARKERS = (';', '#')
ESCAPE = '\\'


def _find_unescaped(value: str, marker: str) -> int:
    pos = value.find(marker)
    while pos > 0 and value[pos - 1] == ESCAPE:
        pos = value.find(marker, pos + 1)
    return pos


def _strip_inline_comment(value: str) -> str:
    # `;` first, then `#` against what is left.
    for marker in COMMENT_MARKERS:
        if (pos := _find_unescaped(value, marker)) >= 0:
            value = value[:pos]
    for marker in COMMENT_MARKERS:
        value = value.replace(ESCAPE + marker, marker)
    return value


def _unquote(value: str) -> str:
    # guard: never probe an empty (or lone `"`) value.
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_text(text: str, ins: IniClass | None = None) -> IniClass:
    """Parse INI `text` into `ins` (a new `IniClass` by default).

    `ins` is NOT cleared here; callers who reload must clear it first.

    Raises:
        InvalidInput: `text` is empty.
    """
    if not text:
        raise InvalidInput('data is empty')
    if ins is None:
        ins = IniClass()

    this_sect = ''
    for i in text.split('\n'):
        i = ''.join(i.split())
        if not i or i[0] in COMMENT_MARKERS:
            continue

        if i[0] == '[' and i[-1] == ']':
            this_sect = i[1:-1]
            continue

        # orphan pairs, or pairs under an empty `[]`.
        if not this_sect:
            continue

        key, sep, val = i.partition('=')
        if not sep or not key:
            continue

        ins._store(this_sect, key, _unquote(_strip_inline_comment(val)))
    return ins


def _is_lossy(key: str, value: str) -> bool:
    if any(c.isspace() for c in key + value):
        return True
    if '=' in key or any(m in value for m in COMMENT_MARKERS):
        return True
    return _unquote(value) != value


def dump_text(
    instance: IniClass, *,
    delimiter: str = '=',
    blank_lines: int = 1
) -> str:
    """Serialize `instance`. Sections without pairs are skipped."""
    buf = StringIO()
    lossy: list[str] = []
    for section in instance:
        pairs = instance[section]
        if not section or not pairs:
            continue
        buf.write(f'[{section}]\n')
        for k, v in pairs.items():
            if _is_lossy(k, v):
                lossy.append(f'[{section}] {k}')
            buf.write(f'{k}{delimiter}{v}\n')
        buf.write('\n' * blank_lines)
    if lossy:
        warn(
            f'{len(lossy)} entr{"y" if len(lossy) == 1 else "ies"} '
            f'would not read back as written: {", ".join(lossy)}',
            stacklevel=2)
    return buf.getvalue()


def open_for_write(filename: str, encoding: str) -> TextIOWrapper:
    """`open(filename, 'w')`, failing loudly with `IniWriteError`."""
    try:
        return open(filename, 'w', encoding=encoding)
    except OSError as e:
        raise IniWriteError(
            e.errno, f'could not open file for writing: {e.strerror}',
            filename) from e


class IniParser(FileHandler[IniClass]):
    """Reads and writes ONE INI file.

    Reading never fails on a missing or unreadable file: it logs
    a warning and yields an empty document. Writing does fail,
    with `IniWriteError`.
    """

    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(buf: TextIOBase, ins: IniClass | None = None) -> IniClass:
        """Read a decoded text stream.

        Lines are rejoined with `\\n`; a blank stream gives
        an empty document instead of `InvalidInput`.
        """
        if ins is None:
            ins = IniClass()
        text = '\n'.join(line.rstrip('\r\n') for line in buf)
        if not text.strip():
            return ins
        return parse_text(text, ins)

    def _decode(self, raw: bytes) -> StringIO:
        try:
            return StringIO(raw.decode(self._codec))
        except UnicodeDecodeError:
            pass

        codec = chardet.detect(raw)
        encoding = codec.get('encoding')
        if encoding is None or codec.get('confidence', 0) < 0.8:
            encoding = 'latin-1'
        logger.debug('%s is not %s, decoding as %s',
                     self._fn, self._codec, encoding)
        # fallbacks
        try:
            return StringIO(raw.decode(encoding))
        except (UnicodeDecodeError, LookupError):
            return StringIO(raw.decode('latin-1'))

    def read(self, ins: IniClass | None = None) -> IniClass:
        """Read the file into `ins` (a new `IniClass` by default)."""
        if ins is None:
            ins = IniClass()
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            logger.warning('INI file not loaded, nothing to read: %s', e)
            return ins
        logger.debug('read %d bytes from %s', len(raw), self._fn)
        return self.readstream(self._decode(raw), ins)

    def write(
        self, instance: IniClass, *,
        delimiter: str = '=',
        blank_lines: int = 1
    ) -> None:
        """Save `instance` to the file, replacing it."""
        text = dump_text(instance, delimiter=delimiter, blank_lines=blank_lines)
        with open_for_write(self._fn, self._codec) as fp:
            fp.write(text)
        logger.debug('wrote %d sections to %s', len(instance), self._fn)

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f' ({self._codec})'
