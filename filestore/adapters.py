"""Bindings for persisting :class:`FileKey` values in host applications.

None of this is needed to use a store; the key only promises a stable
string form, which is what these build on.
"""

import json
import sqlite3

from .filekey import FileKey

SQLITE_TYPE = "filekey"


def dumps_key(key) -> str:
    """Encode `key` as a JSON string."""
    return json.dumps(str(FileKey.parse(key)))


def loads_key(text) -> FileKey:
    """Decode a key encoded by :func:`dumps_key`."""
    return FileKey.parse(json.loads(text))


def adapt_filekey(key: FileKey) -> str:
    return str(key)


def convert_filekey(val: bytes) -> FileKey:
    return FileKey.parse(val.decode("ascii"))


def register_sqlite():
    """Store keys as TEXT and read back columns declared ``FILEKEY`` as
    :class:`FileKey`. Connections need ``detect_types=PARSE_DECLTYPES``.
    """
    sqlite3.register_adapter(FileKey, adapt_filekey)
    sqlite3.register_converter(SQLITE_TYPE, convert_filekey)
