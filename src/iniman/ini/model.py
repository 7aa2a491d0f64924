# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/18 10:31:52

"""
Plain INI structure: sections of `str: str` pairs.

No inheritance, no `[#include]`, no `+=`. A section name and a key
are never stored empty, and assigning `''` to a key removes it.
"""

from collections.abc import Iterator, Mapping, MutableMapping

from .errors import InvalidInput


def _check_name(name: str, what: str) -> None:
    if not name:
        raise InvalidInput(f'{what} is empty')


class IniSectionProxy(MutableMapping[str, str]):
    """Live view of one section of an `IniClass`.

    The proxy is borrowed: it writes straight into its owner,
    and it goes stale once the section is removed from the owner
    or the owner is cleared (e.g. reloaded). Any access through
    a stale proxy raises `ReferenceError`.
    """

    def __init__(self, owner: 'IniClass', section_name: str, /) -> None:
        self._owner = owner
        self._name = section_name
        # the very dict held by owner; identity tells if we are stale.
        self._bound = owner._lookup(section_name)
        if self._bound is None:
            raise KeyError(section_name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def _data(self) -> dict[str, str]:
        if self._owner._lookup(self._name) is not self._bound:
            raise ReferenceError(
                f'section [{self._name}] was removed or reloaded')
        return self._bound

    @property
    def valid(self) -> bool:
        return self._owner._lookup(self._name) is self._bound

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        _check_name(key, 'key')
        data = self._data
        if value == '':
            data.pop(key, None)
        else:
            data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._bound))

    def to_dict(self) -> dict[str, str]:
        """A detached copy of the pairs."""
        return self._data.copy()


class IniClass(MutableMapping[str, IniSectionProxy]):
    """An INI document: section name -> pairs.

    Iteration follows insertion order, though nothing should rely on it.
    """

    def __init__(self) -> None:
        self.__raw_dicts: dict[str, dict[str, str]] = {}

    def _lookup(self, key: str) -> dict[str, str] | None:
        return self.__raw_dicts.get(key)

    def __getitem__(self, key: str) -> IniSectionProxy:
        if key not in self:
            raise KeyError(key)
        return IniSectionProxy(self, key)

    def __setitem__(
        self,
        key: str,
        value: IniSectionProxy | Mapping[str, str]
    ) -> None:
        _check_name(key, 'section')
        # shouldn't keep ptr to external dict in key setting operation.
        pairs = (
            value.to_dict()
            if isinstance(value, IniSectionProxy)
            else dict(value)
        )
        for k in pairs:
            _check_name(k, 'key')
        self.__raw_dicts[key] = {k: v for k, v in pairs.items() if v != ''}

    def __delitem__(self, key: str) -> None:
        del self.__raw_dicts[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return f'<IniClass sections={len(self)}>'

    def setdefault(
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSectionProxy:
        """Return the section `key`, adding it first if missing."""
        _check_name(key, 'section')
        if key not in self.__raw_dicts:
            self[key] = {} if default is None else default
        return IniSectionProxy(self, key)

    def has_key(self, section: str, key: str) -> bool:
        pairs = self.__raw_dicts.get(section)
        return pairs is not None and key in pairs

    def clear(self) -> None:
        # new dicts on next use, so old proxies go stale.
        self.__raw_dicts = {}

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Deep copy of the whole document."""
        return {k: v.copy() for k, v in self.__raw_dicts.items()}

    def _store(self, section: str, key: str, value: str) -> None:
        """Parser-side insert; keeps empty values as read."""
        self.__raw_dicts.setdefault(section, {})[key] = value
