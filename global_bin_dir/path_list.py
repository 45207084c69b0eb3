"""
Turns the raw executable search path into an ordered list of directories
"""

import logging

from global_bin_dir.exceptions import NoSearchPathError

LOG = logging.getLogger(__name__)


def build_search_path(raw_search_path, delimiter, path_name="PATH"):
    """
    Splits the search path on the platform delimiter. Empty segments are dropped, everything else
    is kept verbatim and in order, duplicates and trailing separators included.

    :type raw_search_path: str
    :param raw_search_path: value of the search path variable, None when it is not set

    :type delimiter: str
    :param delimiter: path list delimiter, ``:`` on POSIX and ``;`` on Windows

    :raises global_bin_dir.exceptions.NoSearchPathError: when the variable is not set
    """
    if raw_search_path is None:
        raise NoSearchPathError(path_name=path_name)

    entries = [entry for entry in raw_search_path.split(delimiter) if entry]
    LOG.debug("%s has %d entries", path_name, len(entries))
    return entries
