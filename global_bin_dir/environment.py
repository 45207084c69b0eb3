"""
Process-wide facts the resolver depends on, gathered in one place so they can be injected
"""

import logging
import ntpath
import posixpath

from global_bin_dir.os_utils import OSUtils

LOG = logging.getLogger(__name__)

PATH_NAME = "PATH"
PNPM_HOME_ENV = "PNPM_HOME"


def search_path_name(environ, is_windows):
    """
    Name of the environment variable holding the executable search path.
    Windows environment variables are case-insensitive, so the variable is often spelled ``Path`` there.
    """
    if not is_windows:
        return PATH_NAME
    for key in environ:
        if key.upper() == PATH_NAME:
            return key
    return PATH_NAME


class Environment(object):
    def __init__(self, search_path, exec_path, pnpm_home=None, is_windows=False, path_name=PATH_NAME, delimiter=None):
        """
        Parameters
        ----------
        search_path : str
            raw value of the executable search path variable, None when the variable is not set
        exec_path : str
            path of the currently running interpreter
        pnpm_home : str
            the pnpm home directory, None when it is not configured
        is_windows : bool
            selects Windows path flavor (separator, delimiter, case-insensitive comparison)
        path_name : str
            name of the variable search_path was read from, used in error messages
        delimiter : str
            overrides the platform's path list delimiter
        """
        self.search_path = search_path
        self.exec_path = exec_path
        self.pnpm_home = pnpm_home or None
        self.is_windows = is_windows
        self.path_name = path_name
        self._pathmod = ntpath if is_windows else posixpath
        self.delimiter = delimiter or self._pathmod.pathsep

    @classmethod
    def from_os(cls, osutils=None, pnpm_home=None):
        """
        Reads the facts from the running process. ``pnpm_home`` falls back to the PNPM_HOME variable.
        """
        osutils = osutils or OSUtils()
        environ = osutils.environ
        is_windows = osutils.is_windows()
        path_name = search_path_name(environ, is_windows)
        if pnpm_home is None:
            pnpm_home = environ.get(PNPM_HOME_ENV)
        LOG.debug("Reading executable search path from %s, pnpm home is %s", path_name, pnpm_home)
        return cls(
            search_path=environ.get(path_name),
            exec_path=osutils.exec_path,
            pnpm_home=pnpm_home,
            is_windows=is_windows,
            path_name=path_name,
            delimiter=osutils.path_delimiter,
        )

    @property
    def sep(self):
        return self._pathmod.sep

    def _separators(self):
        if self._pathmod.altsep:
            return self.sep + self._pathmod.altsep
        return self.sep

    def dirname(self, path):
        return self._pathmod.dirname(path)

    def exec_dir(self):
        # sys.executable is empty or None for embedded interpreters
        if not self.exec_path:
            return None
        return self.dirname(self.exec_path)

    def normalize(self, path):
        """
        Drops trailing separators so that ``/a/b/`` and ``/a/b`` compare equal. A bare root is kept.
        On Windows the result is also lowercased, since paths there are case-insensitive.
        """
        stripped = path.rstrip(self._separators())
        if not stripped or (self.is_windows and stripped.endswith(":")):
            stripped = path[: len(stripped) + 1]
        if self.is_windows:
            return stripped.lower()
        return stripped

    def same_dir(self, first, second):
        if first is None or second is None:
            return False
        return self.normalize(first) == self.normalize(second)

    def split_segments(self, path):
        segments = [path]
        for separator in self._separators():
            segments = [part for segment in segments for part in segment.split(separator)]
        return [segment for segment in segments if segment]
