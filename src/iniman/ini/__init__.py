# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 10:16:09

from .errors import IniError, InvalidInput, IniWriteError
from .model import IniSectionProxy, IniClass
from .parser import IniParser, parse_text, dump_text
from .convert import IniJsonParser, IniYamlParser
from .manager import IniManager
