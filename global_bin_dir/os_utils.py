"""
OSUtils implementation used to probe the directories found on PATH
"""
import os
import platform
import stat
import sys
from collections import namedtuple
from enum import Enum


ListedEntry = namedtuple("ListedEntry", ["name", "is_file"])


class WriteAccess(Enum):
    """
    Outcome of a write access probe. A directory that does not exist is not the same
    thing as a directory that exists but cannot be written to.
    """

    WRITABLE = "writable"
    UNWRITABLE = "unwritable"
    NONEXISTENT = "nonexistent"


class OSUtils(object):

    """
    Wrapper around file system functions, to make it easy to
    unit test the resolver in memory
    """

    @property
    def environ(self):
        return os.environ.copy()

    @property
    def path_delimiter(self):
        return os.pathsep

    @property
    def exec_path(self):
        return sys.executable

    def is_windows(self):
        return platform.system().lower() == "windows"

    def can_write_to_dir(self, dirpath):
        """
        Checks whether the current process could create files in ``dirpath`` without writing anything.

        :type dirpath: str
        :param dirpath: Directory to check

        :rtype: WriteAccess
        :return: WRITABLE, UNWRITABLE, or NONEXISTENT when there is no directory at ``dirpath``

        :raises OSError: when the directory cannot be inspected for any other reason
        """
        try:
            st = os.stat(dirpath)
        except (FileNotFoundError, NotADirectoryError):
            return WriteAccess.NONEXISTENT

        if not stat.S_ISDIR(st.st_mode):
            return WriteAccess.NONEXISTENT

        if os.access(dirpath, os.W_OK | os.X_OK):
            return WriteAccess.WRITABLE
        return WriteAccess.UNWRITABLE

    def list_dir(self, dirpath):
        """
        Lists the immediate entries of ``dirpath``, following symlinks to tell files from directories.
        A missing directory has no entries. An entry whose type cannot be read is not a file.

        :rtype: list
        :return: list of ListedEntry
        """
        try:
            with os.scandir(dirpath) as entries:
                return [ListedEntry(entry.name, _is_file(entry)) for entry in entries]
        except (FileNotFoundError, NotADirectoryError):
            return []


def _is_file(entry):
    # Symlink loops and entries that cannot be stat'ed are not files
    try:
        return entry.is_file()
    except OSError:
        return False
