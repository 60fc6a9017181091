"""Writing content into, and reading it back out of, the store."""

import io
import os
from collections import namedtuple

from .errors import wrap_errors


class Buffer(namedtuple("Buffer", ["data"])):
    """In-memory content. Retrieved as ``bytes``."""

    __slots__ = ()

    def __new__(cls, data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise ValueError("Buffer data must be bytes-like, not {0!r}"
                             .format(type(data).__name__))
        return super(Buffer, cls).__new__(cls, bytes(data))


class FileReference(namedtuple("FileReference", ["path"])):
    """A file on the local disk. Retrieved as a system path into the
    store's own copy.
    """

    __slots__ = ()

    def __new__(cls, path):
        return super(FileReference, cls).__new__(cls, os.fspath(path))


def persist(fs, dest, source, chunk_size=None):
    """Write `source` to `dest` on `fs`, creating or truncating it.

    A :class:`FileReference` is copied byte for byte. The source file may live
    on another device and is never moved, linked or modified.
    """
    if isinstance(source, Buffer):
        with wrap_errors("unable to open/create new file"):
            fileobj = fs.openbin(dest, "wb")

        with fileobj:
            with wrap_errors("unable to write new file"):
                fileobj.write(source.data)

    elif isinstance(source, FileReference):
        with wrap_errors("unable to open source file"):
            src = io.open(source.path, "rb")

        with src:
            with wrap_errors("unable to copy file"):
                fs.upload(dest, src, chunk_size=chunk_size)

    else:
        raise ValueError("Source must be a Buffer or a FileReference.")


def load(fs, dest, kind):
    """Read `dest` back as `kind` (:class:`Buffer` or :class:`FileReference`).

    Returns ``bytes`` for a buffer and the system path of `dest` for a file
    reference. That path points at the only stored copy: callers must treat
    it as read-only and go through the store to delete it.
    """
    if kind is Buffer:
        with wrap_errors("unable to open file for reading"):
            fileobj = fs.openbin(dest, "rb")

        with fileobj:
            with wrap_errors("unable to read to end of file"):
                return fileobj.read()

    if kind is FileReference:
        with wrap_errors("no system path for stored file"):
            return fs.getsyspath(dest)

    raise ValueError("Kind must be Buffer or FileReference.")
