# -*- encoding: utf-8 -*-
# @File   : manager.py
# @Time   : 2026/10/18 11:40:26

import logging
from collections.abc import Iterator
from os import PathLike

from ..abstract import FileHandler
from .errors import InvalidInput
from .model import IniClass, IniSectionProxy
from .parser import IniParser, dump_text, parse_text

__all__ = ['IniManager']

logger = logging.getLogger(__name__)


class IniManager:
    """Load, query, edit and save one INI document.

    ```python
    ini = IniManager('settings.ini', is_file=True)
    ini.set('window', 'width', '800')
    ini['window']['height'] = '600'
    ini.save('settings.ini')
    ```

    Not thread-safe: the instance holds no lock, so callers sharing
    one across threads must synchronize access themselves.
    """

    def __init__(
        self,
        source: str | PathLike[str] | None = None,
        is_file: bool = False, *,
        encoding: str = 'utf-8'
    ) -> None:
        self._ini = IniClass()
        self._codec = encoding
        if source is not None:
            self.load(source, is_file)

    def parse(self, data: str) -> None:
        """Replace the document with `data` parsed.

        Raises:
            InvalidInput: `data` is empty. The document is left empty.
        """
        self._ini.clear()
        parse_text(data, self._ini)

    def load(self, source: str | PathLike[str], is_file: bool = False) -> None:
        """Replace the document with `source`:
        INI text, or a file path when `is_file` is set.

        An unreadable or blank file just leaves the document empty.
        """
        self._ini.clear()
        if not is_file:
            parse_text(source, self._ini)
            return
        IniParser(source, self._codec).read(self._ini)
        logger.debug('loaded %d sections from %s', len(self._ini), source)

    def get(self, section: str, key: str) -> str:
        """Value of `key` in `section`, or `''` if the key is absent.

        Nothing is created. Use `has_key()` to tell absent from empty.
        """
        if not section:
            raise InvalidInput('section is empty; call get_data() instead')
        if not key:
            raise InvalidInput('key is empty; call get_header() instead')
        if section not in self._ini:
            raise InvalidInput(f'section [{section}] not found')
        return self._ini[section].get(key, '')

    def get_header(self, section: str) -> IniSectionProxy:
        """Live view of `section`, which is added if missing."""
        if not section:
            raise InvalidInput('section is empty')
        return self._ini.setdefault(section)

    get_or_create_section = get_header

    def get_data(self) -> dict[str, dict[str, str]]:
        """Copy of every section; editing it changes nothing here."""
        return self._ini.to_dict()

    def has_section(self, section: str) -> bool:
        return section in self._ini

    def has_key(self, section: str, key: str) -> bool:
        return self._ini.has_key(section, key)

    def set(self, section: str, key: str, value: str) -> None:
        """Set `key` in `section`. An empty `value` removes the key."""
        if not section:
            raise InvalidInput('section is empty')
        if not key:
            raise InvalidInput('key is empty')
        if value == '':
            if section in self._ini:
                self._ini[section].pop(key, None)
            return
        self._ini.setdefault(section)[key] = value

    def remove_header(self, section: str) -> bool:
        """Drop `section`. Returns whether it was there."""
        if section not in self._ini:
            return False
        del self._ini[section]
        return True

    def to_string(self, *, delimiter: str = '=', blank_lines: int = 1) -> str:
        return dump_text(self._ini, delimiter=delimiter, blank_lines=blank_lines)

    def save(self, path: str | PathLike[str], encoding: str | None = None) -> None:
        """Write `to_string()` to `path`.

        Raises:
            IniWriteError: `path` cannot be opened for writing.
        """
        IniParser(path, encoding or self._codec).write(self._ini)

    def dump_to(self, handler: FileHandler[IniClass]) -> None:
        """Write the document through another handler, e.g. JSON or YAML."""
        handler.write(self._ini)

    def load_from(self, handler: FileHandler[IniClass]) -> None:
        """Replace the document with what `handler` reads."""
        data = handler.read()
        self._ini.clear()
        for section, pairs in data.items():
            self._ini[section] = pairs

    def __getitem__(self, section: str) -> IniSectionProxy:
        return self.get_header(section)

    def __contains__(self, section: object) -> bool:
        return section in self._ini

    def __len__(self) -> int:
        return len(self._ini)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ini)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f'<IniManager sections={len(self._ini)}>'
