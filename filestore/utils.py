# -*- coding: utf-8 -*-


"""
hashing and path helpers for filestore
"""


import hashlib
import io
import os
from typing import List

import fs as pyfs
import fs.base
import fs.path

from .content import Buffer, FileReference
from .errors import wrap_errors

ALGORITHM = "sha224"
CHUNK_SIZE = 4096
REFCOUNT_SUFFIX = ".refcount"
SHARD_DEPTH = 1
SHARD_WIDTH = 2


def shard(key, depth=SHARD_DEPTH, width=SHARD_WIDTH) -> List[str]:
    """Split `key` into `depth` directory names of `width` characters each,
    followed by the file name made of the rest of the key.
    """
    cut = depth * width
    dirs = [key[i:i + width] for i in range(0, cut, width)]
    return [d for d in dirs if d] + [key[cut:]]


def shard_dir(root: str, key: str) -> str:
    """Directory holding the content and refcount files of `key`."""
    return pyfs.path.join(root, *shard(key)[:-1])


def content_path(root: str, key: str) -> str:
    return pyfs.path.join(root, *shard(key))


def refcount_path(root: str, key: str) -> str:
    return content_path(root, key) + REFCOUNT_SUFFIX


def load_fs(root) -> pyfs.base.FS:
    """Return `root` if it is already a filesystem, otherwise open (and
    create if needed) the directory it names.
    """
    if isinstance(root, pyfs.base.FS):
        return root

    with wrap_errors("unable to open store root"):
        return pyfs.open_fs(os.fspath(root), create=True)


class Stream(object):
    """Iterate over the bytes of a :class:`Buffer` or :class:`FileReference`.

    A buffer is yielded whole. A referenced file is opened on construction
    and read `chunk_size` bytes at a time until a read comes back empty, so
    memory use doesn't depend on the file's size. The file stays open until
    :meth:`close` is called.
    """

    def __init__(self, source, chunk_size=CHUNK_SIZE):
        if isinstance(source, Buffer):
            obj = None
        elif isinstance(source, FileReference):
            with wrap_errors("cannot open content file for hashing"):
                obj = io.open(source.path, "rb")
        else:
            raise ValueError("Source must be a Buffer or a FileReference.")

        self._source = source
        self._obj = obj
        self.chunk_size = chunk_size

    def __iter__(self):
        if self._obj is None:
            yield self._source.data
            return

        while True:
            with wrap_errors("unable to read file to hash"):
                data = self._obj.read(self.chunk_size)

            if not data:
                break

            yield data

    def close(self):
        """Close the underlying file if one was opened."""
        if self._obj is not None:
            self._obj.close()


def computehash(stream, algorithm=ALGORITHM) -> str:
    """Compute the lowercase hex digest of `stream` using `algorithm`."""
    hash = hashlib.new(algorithm)
    for data in stream:
        hash.update(data)
    return hash.hexdigest()
