"""Module for FileStore class."""

import os
from contextlib import closing
from typing import Optional, Union

import fs as pyfs
import fs.base
import fs.errors
from fs.permissions import Permissions

import filestore.utils as u
from filestore.content import Buffer, FileReference, load, persist
from filestore.errors import NotFound, wrap_errors
from filestore.filekey import FileKey
from filestore.locks import KeyLocks, for_root
from filestore.refcount import get_refcount, set_refcount

Key = Union[str, FileKey]

ROOT = "/"


class FileStore(object):
    """Reference-counted, content-addressed file store.

    Content is saved under the SHA-224 digest of its bytes. Storing the same
    content again doesn't write a second copy, it bumps a reference count
    kept next to the content; the content is removed once every reference
    has been deleted.

    Attributes:
        fs: Filesystem backing the store. Built from the `root` argument,
            which is either a directory path (created if missing) or an
            ``fs.base.FS`` instance.
        dmode (int, optional): Directory mode permission to set for shard
            directories. Defaults to ``0o755``.
        chunk_size (int, optional): Number of bytes read at a time when
            hashing or copying a file. Defaults to ``4096``.
        locks (KeyLocks, optional): Per-key lock table. Defaults to the table
            shared by every store opened on the same root in this process.
    """

    def __init__(self,
                 root: Union[pyfs.base.FS, str],
                 dmode: Optional[int] = 0o755,
                 chunk_size: Optional[int] = u.CHUNK_SIZE,
                 locks: Optional[KeyLocks] = None):

        self.fs = u.load_fs(root)
        self.dmode = dmode
        self.chunk_size = chunk_size
        self.locks = self._shared_locks() if locks is None else locks

    def store_data(self, data: bytes) -> FileKey:
        """Store `data` from memory. The returned key retrieves it later.
        """
        return self.store(Buffer(data))

    def store_file(self, path: str) -> FileKey:
        """Store a copy of the file at `path`.

        The file is always copied, since it may not be on the same device as
        the store. It is left as it was.
        """
        return self.store(FileReference(path))

    def retrieve_data(self, k: Key) -> Optional[bytes]:
        """Return the content stored under `k`, or ``None`` if there is none.
        """
        return self.retrieve(k, Buffer)

    def retrieve_file(self, k: Key) -> Optional[str]:
        """Return the system path of the content stored under `k`, or
        ``None`` if there is none.

        The path is the store's only copy, not a new one. Don't modify or
        remove it; use :meth:`delete` so the refcount stays right.
        """
        return self.retrieve(k, FileReference)

    def store(self, source) -> FileKey:
        """Store a :class:`Buffer` or :class:`FileReference` and return its
        key.

        Steps run in order and the first failure is raised as is. Nothing
        already done is rolled back.
        """
        with closing(u.Stream(source, self.chunk_size)) as stream:
            key = FileKey(u.computehash(stream))

        self._makedirs(u.shard_dir(ROOT, key))

        with self.locks.hold(key):
            path = self.content_path(key)

            # An existing file is taken to hold the same bytes; the digest
            # is what makes that safe.
            if not self._isfile(path):
                persist(self.fs, path, source, chunk_size=self.chunk_size)

            self._set_refcount(key, self.refcount(key) + 1)

        return key

    def retrieve(self, k: Key, kind=Buffer):
        """Load the content under `k` as `kind`. Return ``None`` if no
        content is stored for `k`.

        Raises:
            IoFailure: If the content exists but cannot be read.
        """
        key = FileKey.parse(k)
        path = self.content_path(key)

        if not self._isfile(path):
            return None

        try:
            return load(self.fs, path, kind)
        except NotFound:
            # Deleted since the check above.
            return None

    def delete(self, k: Key) -> None:
        """Drop one reference to `k`, removing the content with the last one.
        Deleting a key with no references does nothing.

        Raises:
            IoFailure: If the refcount can't be updated or the content can't
                be removed. In the latter case the refcount is already zero
                and the content file is left behind.
        """
        key = FileKey.parse(k)

        with self.locks.hold(key):
            count = self.refcount(key)
            if count < 1:
                return

            count -= 1
            self._set_refcount(key, count)

            if count < 1:
                with wrap_errors("unable to remove file"):
                    self.fs.remove(self.content_path(key))

    def refcount(self, k: Key) -> int:
        """Return the number of references held on `k`."""
        return get_refcount(self.fs, self.refcount_path(k))

    def exists(self, k: Key) -> bool:
        """Check whether content is stored under `k`. Malformed keys are
        never stored.
        """
        try:
            path = self.content_path(k)
        except ValueError:
            return False

        return self._isfile(path)

    def content_path(self, k: Key) -> str:
        """Path of the content file for `k`, relative to :attr:`fs`."""
        return u.content_path(ROOT, FileKey.parse(k))

    def refcount_path(self, k: Key) -> str:
        """Path of the refcount file for `k`, relative to :attr:`fs`."""
        return u.refcount_path(ROOT, FileKey.parse(k))

    def abspath(self, k: Key) -> str:
        """System path of the content file for `k`, whether or not it exists.
        """
        with wrap_errors("no system path for stored file"):
            return self.fs.getsyspath(self.content_path(k))

    def __contains__(self, k: Key) -> bool:
        return self.exists(k)

    def _set_refcount(self, key: FileKey, count: int) -> None:
        set_refcount(self.fs, self.refcount_path(key), count)

    def _shared_locks(self) -> KeyLocks:
        """Lock table for this store's root. Roots are matched by resolved
        system path, or by filesystem object when there is none.
        """
        try:
            root_id = os.path.realpath(self.fs.getsyspath(ROOT))
        except pyfs.errors.NoSysPath:
            root_id = id(self.fs)

        return for_root(root_id)

    def _isfile(self, path: str) -> bool:
        with wrap_errors("unable to check for stored file"):
            return self.fs.isfile(path)

    def _makedirs(self, dir_path: str) -> None:
        """Physically create the shard folder; an existing one is fine."""
        with wrap_errors("unable to create shard directory"):
            perms = Permissions.create(self.dmode)
            self.fs.makedirs(dir_path, permissions=perms, recreate=True)
