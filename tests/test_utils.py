# -*- coding: utf-8 -*-

import hashlib

import pytest

import filestore.utils as u
from filestore import Buffer, FileReference, IoFailure, NotFound


KEY = "ab" + "cdef0123" * 6 + "456789"


def test_shard_dir():
    assert u.shard_dir("/srv/store", KEY) == "/srv/store/ab"


def test_content_path():
    assert u.content_path("/srv/store", KEY) == "/srv/store/ab/" + KEY[2:]


def test_refcount_path():
    assert (u.refcount_path("/srv/store", KEY) ==
            "/srv/store/ab/" + KEY[2:] + ".refcount")


def test_paths_relative_root():
    assert u.content_path("/", KEY) == "/ab/" + KEY[2:]


@pytest.mark.parametrize("depth,width,expected", [
    (1, 2, ["ab", KEY[2:]]),
    (2, 1, ["a", "b", KEY[2:]]),
    (0, 2, [KEY]),
])
def test_shard(depth, width, expected):
    assert u.shard(KEY, depth, width) == expected


def test_shard_default():
    assert u.shard(KEY) == ["ab", KEY[2:]]


def test_computehash_buffer():
    stream = u.Stream(Buffer(b"foo"))

    assert u.computehash(stream) == hashlib.sha224(b"foo").hexdigest()
    assert len(u.computehash(u.Stream(Buffer(b"")))) == 56


def test_computehash_file(filepath):
    stream = u.Stream(FileReference(str(filepath)))

    try:
        digest = u.computehash(stream)
    finally:
        stream.close()

    assert digest == hashlib.sha224(filepath.read_binary()).hexdigest()


@pytest.mark.parametrize("chunk_size", [1, 3, 4096, 1 << 20])
def test_stream_chunks(filepath, chunk_size):
    stream = u.Stream(FileReference(str(filepath)), chunk_size=chunk_size)
    chunks = list(stream)
    stream.close()

    assert all(0 < len(chunk) <= chunk_size for chunk in chunks)
    assert b"".join(chunks) == filepath.read_binary()


def test_stream_buffer_single_chunk():
    assert list(u.Stream(Buffer(b"foo"), chunk_size=1)) == [b"foo"]


def test_stream_missing_file(tmpdir):
    with pytest.raises(NotFound) as excinfo:
        u.Stream(FileReference(str(tmpdir.join("missing"))))

    assert excinfo.value.message == "cannot open content file for hashing"


def test_stream_read_oserror(filepath, monkeypatch):
    stream = u.Stream(FileReference(str(filepath)))

    def read(size):
        raise OSError(5, "Input/output error")

    monkeypatch.setattr(stream, "_obj", type("Broken", (), {
        "read": staticmethod(read),
        "close": lambda self: None,
    })())

    with pytest.raises(IoFailure) as excinfo:
        list(stream)

    assert excinfo.value.message == "unable to read file to hash"


def test_stream_invalid():
    with pytest.raises(ValueError):
        u.Stream("foo")


def test_load_fs_passthrough():
    from fs.memoryfs import MemoryFS

    mem = MemoryFS()
    assert u.load_fs(mem) is mem


def test_load_fs_path(tmpdir):
    root = tmpdir.join("root")
    filesystem = u.load_fs(str(root))

    assert root.isdir()
    assert filesystem.getsyspath("/")
