# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/18 13:05:44

"""Export an INI document to JSON or YAML, and read it back.

Both only carry `section: {key: value}` pairs, the same
as what `IniClass.to_dict()` gives.
"""

import json
from os import PathLike
from typing import Any, TypedDict

import yaml

from ..abstract import FileHandler
from .errors import InvalidInput
from .model import IniClass
from .parser import open_for_write

__all__ = ['IniJsonParser', 'IniYamlParser']


_IniJson = TypedDict('_IniJson', {
    '$schema': str,
    'protocol': int,
    'data': dict[str, dict[str, str]]
}, total=False)


def _to_pairs(instance: IniClass) -> dict[str, dict[str, str]]:
    return {k: v for k, v in instance.to_dict().items() if k and v}


def _from_pairs(src: Any, origin: str) -> IniClass:
    if not isinstance(src, dict):
        raise InvalidInput(f'{origin}: expected a mapping of sections')
    ret = IniClass()
    for section, pairs in src.items():
        if pairs is None:
            continue
        if not isinstance(pairs, dict):
            raise InvalidInput(f'{origin}: [{section}] is not a mapping')
        # may there be some pure digits or bools considered as non-str
        cur = {
            str(k): str(v) for k, v in pairs.items()
            if k is not None and v is not None and str(k) != ''
        }
        if section is not None and str(section) != '':
            ret[str(section)] = cur
    return ret


class IniJsonParser(FileHandler[IniClass]):
    JSON_TEMPLATE = _IniJson({
        '$schema': 'https://json-schema.org/draft/2020-12/schema',
        'protocol': 1,
    })

    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8', indent: int = 2
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._indent = indent

    def read(self) -> IniClass:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src: _IniJson = json.load(fp)
        if not isinstance(src, dict) or 'data' not in src:
            raise InvalidInput(f'{self._fn}: no "data" object')
        return _from_pairs(src['data'], self._fn)

    def write(self, instance: IniClass) -> None:
        ret = self.JSON_TEMPLATE.copy()
        ret['data'] = _to_pairs(instance)
        with open_for_write(self._fn, self._codec) as fp:
            json.dump(ret, fp, ensure_ascii=False, indent=self._indent)


class IniYamlParser(FileHandler[IniClass]):
    """Plain `section: {key: value}` YAML.

    Written strings are quoted as needed. In hand-written YAML, scalars
    typed by YAML itself (`1`, `yes`) come back as the `str` of the typed
    value, so `on: yes` reads as `{'True': 'True'}` under YAML 1.1 rules.
    """

    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniClass:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = yaml.safe_load(fp)
        if src is None:  # empty doc
            return IniClass()
        return _from_pairs(src, self._fn)

    def write(self, instance: IniClass) -> None:
        with open_for_write(self._fn, self._codec) as fp:
            yaml.safe_dump(
                _to_pairs(instance), fp,
                allow_unicode=True, default_flow_style=False, sort_keys=False)
