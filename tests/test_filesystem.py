"""Tests for LocalFileSystem."""

import os
import stat

import pytest

from conftest import write_file
from emu_shell.filesystem import LocalFileSystem


@pytest.fixture
def fs():
    return LocalFileSystem()


class TestReadWrite:
    """Test text reads and writes."""

    def test_write_then_read(self, fs, workdir):
        path = os.path.join(workdir, 'f.txt')
        fs.write_text(path, 'one\n')
        assert fs.read_text(path) == 'one\n'

    def test_append(self, fs, workdir):
        path = os.path.join(workdir, 'f.txt')
        fs.write_text(path, 'one\n')
        fs.write_text(path, 'two\n', append=True)
        assert fs.read_text(path) == 'one\ntwo\n'

    def test_truncate(self, fs, workdir):
        path = write_file(workdir, 'f.txt', 'long old content\n')
        fs.write_text(path, 'new\n')
        assert fs.read_text(path) == 'new\n'

    def test_read_missing(self, fs, workdir):
        with pytest.raises(FileNotFoundError):
            fs.read_text(os.path.join(workdir, 'missing'))


class TestListing:
    """Test directory listing and metadata."""

    def test_sorted_entries(self, fs, populated_dir):
        names = [info['name'] for info in fs.list_directory(populated_dir)]
        assert names == ['a.txt', 'b.txt', 'full', 'sub']

    def test_entry_metadata(self, fs, populated_dir):
        info = {i['name']: i for i in fs.list_directory(populated_dir)}
        assert info['a.txt']['type'] == 'file'
        assert info['a.txt']['size'] == len('alpha\n')
        assert stat.S_ISREG(info['a.txt']['mode'])
        assert info['sub']['type'] == 'directory'
        assert info['a.txt']['path'] == os.path.join(populated_dir, 'a.txt')

    def test_symlink_is_not_followed(self, fs, populated_dir):
        os.symlink(os.path.join(populated_dir, 'sub'), os.path.join(populated_dir, 'link'))
        assert fs.get_metadata(os.path.join(populated_dir, 'link'))['type'] == 'symlink'


class TestDelete:
    """Test deletions."""

    def test_delete_file(self, fs, populated_dir):
        path = os.path.join(populated_dir, 'a.txt')
        fs.delete_file(path)
        assert not fs.exists(path)

    def test_delete_file_refuses_directory(self, fs, populated_dir):
        with pytest.raises(IsADirectoryError):
            fs.delete_file(os.path.join(populated_dir, 'sub'))

    def test_delete_empty_directory(self, fs, populated_dir):
        path = os.path.join(populated_dir, 'sub')
        fs.delete_directory(path)
        assert not fs.is_directory(path)

    def test_delete_non_empty_directory(self, fs, populated_dir):
        with pytest.raises(OSError):
            fs.delete_directory(os.path.join(populated_dir, 'full'))
