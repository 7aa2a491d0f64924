# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/18 10:20:03


class IniError(Exception):
    """Base class of every error raised by `iniman`."""
    pass


class InvalidInput(IniError, ValueError):
    """An argument the caller must not pass: empty text to parse,
    an empty section or key, or a section that does not exist."""
    pass


class IniWriteError(IniError, OSError):
    """The destination file could not be opened for writing."""
    pass
