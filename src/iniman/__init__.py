# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 10:08:31

import logging

from .abstract import FileHandler
from .ini import (
    IniError, InvalidInput, IniWriteError,
    IniSectionProxy, IniClass,
    IniParser, IniJsonParser, IniYamlParser,
    IniManager, parse_text, dump_text
)

__all__ = [
    'FileHandler',
    'IniError', 'InvalidInput', 'IniWriteError',
    'IniSectionProxy', 'IniClass',
    'IniParser', 'IniJsonParser', 'IniYamlParser',
    'IniManager', 'parse_text', 'dump_text'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
