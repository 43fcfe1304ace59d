"""Tests for the local filesystem resource."""

import os
import platform
from pathlib import Path

import pytest

from locate.resources import FileResource


def test_file_resource(temp_file: Path):
    """Test that an existing file exists and can be read."""
    resource = FileResource(str(temp_file))
    assert resource.location == str(temp_file)
    assert resource.exists()
    with resource.open() as stream:
        assert stream.read() == b"Hello, world!"


def test_file_resource_missing(temp_dir: Path):
    """Test that a missing file does not exist and can't be opened."""
    resource = FileResource(str(temp_dir.joinpath("missing.txt")))
    assert not resource.exists()
    with pytest.raises(FileNotFoundError):
        resource.open()


def test_file_resource_directory(temp_dir: Path):
    """Test that directories are not reported as existing resources."""
    resource = FileResource(str(temp_dir))
    assert not resource.exists()


def test_file_resource_empty_path():
    """Test that an empty path does not exist."""
    assert not FileResource("").exists()


def test_file_resource_null_byte():
    """Test that an invalid path does not exist."""
    assert not FileResource("some\x00path").exists()


@pytest.mark.skipif(platform.system() == "Windows", reason="symlinks need privileges")
def test_file_resource_symlinks(temp_dir: Path, temp_file: Path):
    """Test that symlinks exist only where they point to regular files."""
    file_link = temp_dir.joinpath("file_link")
    os.symlink(temp_file, file_link)
    assert FileResource(str(file_link)).exists()

    dir_link = temp_dir.joinpath("dir_link")
    os.symlink(temp_dir, dir_link)
    assert not FileResource(str(dir_link)).exists()

    dangling_link = temp_dir.joinpath("dangling_link")
    os.symlink(temp_dir.joinpath("missing.txt"), dangling_link)
    assert not FileResource(str(dangling_link)).exists()


def test_file_resource_is_lazy(temp_dir: Path):
    """Test that the file is only read when opened."""
    path = temp_dir.joinpath("later.txt")
    resource = FileResource(str(path))
    assert not resource.exists()

    path.write_bytes(b"Created later")
    assert resource.exists()
    with resource.open() as stream:
        assert stream.read() == b"Created later"
