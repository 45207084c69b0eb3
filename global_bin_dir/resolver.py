"""
Resolver that picks the directory on PATH where global executables should be installed.
"""

import logging

from global_bin_dir.environment import Environment
from global_bin_dir.exceptions import (
    GlobalBinDirPermissionError,
    NoGlobalBinDirError,
    PnpmHomePermissionError,
    ProbeFailedError,
)
from global_bin_dir.os_utils import OSUtils, WriteAccess
from global_bin_dir.path_list import build_search_path
from global_bin_dir.tiers import PNPM_HOME_TIER, Candidate, EvaluationContext, iter_candidates

LOG = logging.getLogger(__name__)


class GlobalBinDirResolver(object):
    def __init__(self, osutils=None, environment=None, runner_cache_patterns=None):
        """
        Parameters
        ----------
        osutils : global_bin_dir.os_utils.OSUtils
            write access probe and directory lister
        environment : global_bin_dir.environment.Environment
            search path, interpreter path and pnpm home. Read from the running process when not given
        runner_cache_patterns : list
            fnmatch patterns of path segments that mark transient package runner caches, like ``_npx*``
        """
        self.osutils = osutils or OSUtils()
        self.environment = environment or Environment.from_os(self.osutils)
        self.runner_cache_patterns = runner_cache_patterns

    def resolve(self, known_suitable_dirs=None, should_allow_write=True):
        """
        Parameters
        ----------
        known_suitable_dirs : list
            directories the caller already knows to be good locations, preferred over the
            heuristics in the given order. They are only picked if they are on PATH
        should_allow_write : bool
            when False, the first matching directory is returned without checking write access.
            The pnpm home directory is always checked

        Returns
        -------
        str
            the search path entry, exactly as it appears in PATH

        Raises
        ------
        NoSearchPathError
            PATH is not set
        PnpmHomePermissionError
            the pnpm home directory is on PATH but is not writable
        GlobalBinDirPermissionError
            suitable directories exist but none of them is writable
        NoGlobalBinDirError
            no directory on PATH is suitable
        ProbeFailedError
            a directory could not be inspected
        """
        entries = build_search_path(
            self.environment.search_path, self.environment.delimiter, path_name=self.environment.path_name
        )
        context = EvaluationContext(
            self.environment,
            self.osutils,
            known_suitable_dirs=known_suitable_dirs,
            runner_cache_patterns=self.runner_cache_patterns,
        )

        pnpm_home_dir = self._resolve_pnpm_home(entries, context)
        if pnpm_home_dir is not None:
            return pnpm_home_dir

        candidates = iter_candidates(entries, context)
        if not should_allow_write:
            for candidate in candidates:
                LOG.debug("Using %s without checking write access", candidate.path)
                return candidate.path
            raise NoGlobalBinDirError(path_name=self.environment.path_name)

        unwritable = []
        for candidate in candidates:
            self._probe(candidate)
            if candidate.writable == WriteAccess.WRITABLE:
                LOG.debug("Using %s (%s)", candidate.path, candidate.tier.name)
                return candidate.path
            if candidate.writable == WriteAccess.UNWRITABLE:
                unwritable.append(candidate.path)

        if unwritable:
            raise GlobalBinDirPermissionError(path=unwritable[0], dirs=unwritable)
        raise NoGlobalBinDirError(path_name=self.environment.path_name)

    def _resolve_pnpm_home(self, entries, context):
        for path in entries:
            if not PNPM_HOME_TIER.matches(path, context):
                continue
            candidate = self._probe(Candidate(path, PNPM_HOME_TIER))
            if candidate.writable == WriteAccess.WRITABLE:
                LOG.debug("Using the pnpm home directory at %s", path)
                return path
            if candidate.writable == WriteAccess.UNWRITABLE:
                raise PnpmHomePermissionError(path=path)
        return None

    def _probe(self, candidate):
        try:
            candidate.writable = self.osutils.can_write_to_dir(candidate.path)
        except OSError as ex:
            raise ProbeFailedError(path=candidate.path, reason=str(ex)) from ex
        LOG.debug("%s is %s", candidate.path, candidate.writable.value)
        return candidate


def resolve(known_suitable_dirs=None, should_allow_write=True, osutils=None, environment=None):
    """
    Returns the directory on PATH where global executables should be installed.
    See GlobalBinDirResolver.resolve
    """
    resolver = GlobalBinDirResolver(osutils=osutils, environment=environment)
    return resolver.resolve(known_suitable_dirs=known_suitable_dirs, should_allow_write=should_allow_write)
