"""LocalFileSystem - FileSystemInterface backed by the host filesystem"""

import errno
import os
import stat
from typing import Any, Dict, List

from .filesystem_interface import FileSystemInterface


class LocalFileSystem(FileSystemInterface):
    """Host filesystem access through the os module."""

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def read_text(self, path: str) -> str:
        with open(path, 'r', encoding=self.encoding, newline='') as f:
            return f.read()

    def write_text(self, path: str, text: str, append: bool = False) -> None:
        mode = 'a' if append else 'w'
        with open(path, mode, encoding=self.encoding, newline='') as f:
            f.write(text)

    def list_directory(self, path: str) -> List[Dict[str, Any]]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                entries.append(self._describe(entry.name, entry.path, entry.stat(follow_symlinks=False)))
        entries.sort(key=lambda info: info['name'])
        return entries

    def get_metadata(self, path: str) -> Dict[str, Any]:
        return self._describe(os.path.basename(path) or path, path, os.lstat(path))

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def delete_file(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
        os.remove(path)

    def delete_directory(self, path: str) -> None:
        os.rmdir(path)

    @staticmethod
    def _describe(name: str, path: str, st: os.stat_result) -> Dict[str, Any]:
        if stat.S_ISLNK(st.st_mode):
            kind = 'symlink'
        elif stat.S_ISDIR(st.st_mode):
            kind = 'directory'
        else:
            kind = 'file'

        return {
            'name': name,
            'path': path,
            'type': kind,
            'size': st.st_size,
            'mode': st.st_mode,
            'mtime': st.st_mtime,
        }
