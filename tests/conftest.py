# -*- coding: utf-8 -*-

import pytest

import filestore


@pytest.fixture
def testpath(tmpdir):
    return tmpdir.mkdir("filestore")


@pytest.fixture
def filepath(tmpdir):
    path = tmpdir.mkdir("source").join("source.bin")
    path.write_binary(b"foo\x00bar" * 1000)
    return path


@pytest.fixture
def store(testpath):
    return filestore.FileStore(str(testpath))
