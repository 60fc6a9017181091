# -*- coding: utf-8 -*-
"""filestore is a content-addressed file store. Content handed to it, as
bytes or as a file, is saved under the SHA-224 digest of those bytes and
the digest is returned as a :class:`FileKey`.

Content is deduplicated: storing the same bytes twice keeps one copy and a
reference count, and the copy is removed when the last reference is
deleted.
"""

import logging

from .__meta__ import (
    __title__,
    __summary__,
    __url__,
    __version__,
    __author__,
    __email__,
    __license__,
)

from .content import Buffer, FileReference
from .errors import StoreError, IoFailure, NotFound
from .filekey import FileKey
from .filestore import FileStore
from .locks import KeyLocks


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = (
    "FileStore",
    "FileKey",
    "Buffer",
    "FileReference",
    "KeyLocks",
    "StoreError",
    "IoFailure",
    "NotFound",
)
