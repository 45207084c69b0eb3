"""
Heuristic tiers used to rank the directories found on PATH.

Tiers are kept as an ordered table of predicates so that the resolver can walk them
in a single loop; the first tier in the table has the highest priority.
"""

import fnmatch
import logging
from collections import namedtuple

from global_bin_dir.exceptions import ProbeFailedError

LOG = logging.getLogger(__name__)

DEFAULT_RUNNER_CACHE_PATTERNS = ("_npx*",)

NODE_BINARY_NAMES = ("node", "node.bat")
WINDOWS_NODE_BINARY_NAMES = NODE_BINARY_NAMES + ("node.exe",)


class Candidate(object):
    """
    A search path entry matched by a tier. ``writable`` stays None until the entry is probed.
    """

    def __init__(self, path, tier, writable=None):
        self.path = path
        self.tier = tier
        self.writable = writable

    def __repr__(self):
        return "Candidate(path={!r}, tier={}, writable={})".format(self.path, self.tier.name, self.writable)


class EvaluationContext(object):
    def __init__(self, environment, osutils, known_suitable_dirs=None, runner_cache_patterns=None):
        self.environment = environment
        self.osutils = osutils
        self.known_suitable_dirs = list(known_suitable_dirs or [])
        if runner_cache_patterns is None:
            runner_cache_patterns = DEFAULT_RUNNER_CACHE_PATTERNS
        self.runner_cache_patterns = tuple(pattern.lower() for pattern in runner_cache_patterns)

    def is_runner_cache(self, path):
        return any(
            fnmatch.fnmatchcase(segment.lower(), pattern)
            for segment in self.environment.split_segments(path)
            for pattern in self.runner_cache_patterns
        )

    def known_index(self, path):
        for index, known in enumerate(self.known_suitable_dirs):
            if self.environment.same_dir(path, known):
                return index
        return None


Tier = namedtuple("Tier", ["rank", "name", "matches", "order_key"])


def is_pnpm_home(path, context):
    return context.environment.same_dir(path, context.environment.pnpm_home)


def is_known_suitable(path, context):
    return context.known_index(path) is not None


def _has_named_segment(needle):
    def matches(path, context):
        if context.is_runner_cache(path):
            return False
        return any(needle in segment.lower() for segment in context.environment.split_segments(path))

    return matches


def is_exec_dir(path, context):
    return context.environment.same_dir(path, context.environment.exec_dir())


def has_node_binary(path, context):
    names = WINDOWS_NODE_BINARY_NAMES if context.environment.is_windows else NODE_BINARY_NAMES
    try:
        listing = context.osutils.list_dir(path)
    except OSError as ex:
        raise ProbeFailedError(path=path, reason=str(ex)) from ex
    return any(entry.is_file and entry.name in names for entry in listing)


PNPM_HOME_TIER = Tier(0, "pnpm-home", is_pnpm_home, None)

SEARCH_TIERS = (
    Tier(1, "known-suitable", is_known_suitable, lambda path, context: context.known_index(path)),
    Tier(2, "node-named", _has_named_segment("node"), None),
    Tier(3, "npm-named", _has_named_segment("npm"), None),
    Tier(4, "current-exec-dir", is_exec_dir, None),
    Tier(5, "has-node-binary", has_node_binary, None),
)


def iter_candidates(entries, context, tiers=SEARCH_TIERS):
    """
    Yields a Candidate for every entry that matches a tier, in tier order and then in search path order.
    An entry is only yielded for the best tier it matches. Tiers are evaluated lazily, so lower tiers
    (and the directory listings they need) are only looked at when the caller keeps iterating.

    :type entries: list
    :param entries: search path entries, in search path order

    :type context: EvaluationContext
    :param context: facts and collaborators the tier predicates need
    """
    claimed = set()
    for tier in tiers:
        unclaimed = ((index, path) for index, path in enumerate(entries) if index not in claimed)
        matched = ((index, path) for index, path in unclaimed if tier.matches(path, context))
        if tier.order_key is not None:
            matched = sorted(matched, key=lambda item: tier.order_key(item[1], context))

        for index, path in matched:
            claimed.add(index)
            LOG.debug("%s matches the %s tier", path, tier.name)
            yield Candidate(path, tier)
