"""On-disk reference counts.

Each stored blob has a sibling ``<name>.refcount`` file holding a 4 byte,
big-endian, unsigned count of the references handed out for it. A missing
file means a count of zero. Callers serialize access per key; nothing here
locks.
"""

import struct

from .errors import NotFound, wrap_errors

RECORD = struct.Struct(">I")
MAX_REFCOUNT = 2 ** 32 - 1


def get_refcount(fs, path) -> int:
    """Return the count stored at `path`, or ``0`` if there is none.

    A record cut short (e.g. by a crash mid-write) also reads as ``0``.
    """
    try:
        with wrap_errors("unable to open refcount file"):
            fileobj = fs.openbin(path, "rb")
    except NotFound:
        return 0

    with fileobj:
        with wrap_errors("unable to read refcount file"):
            data = fileobj.read(RECORD.size)

    if len(data) < RECORD.size:
        return 0

    return RECORD.unpack(data)[0]


def set_refcount(fs, path, count) -> None:
    """Store `count` at `path`. A count of ``0`` removes the record."""
    if not 0 <= count <= MAX_REFCOUNT:
        raise ValueError("Refcount out of range: {0!r}".format(count))

    if count == 0:
        with wrap_errors("unable to remove refcount file"):
            fs.remove(path)
        return

    with wrap_errors("unable to open/create new refcount file"):
        fileobj = fs.openbin(path, "wb")

    with fileobj:
        with wrap_errors("unable to write refcount file"):
            fileobj.write(RECORD.pack(count))
