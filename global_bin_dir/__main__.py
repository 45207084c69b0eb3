"""
CLI interface for the global bin directory resolver. It is a very thin wrapper over the library, meant for
tools written in other programming languages that can't import Python libraries directly. The CLI provides
a JSON-RPC interface over stdin/stdout to resolve the directory and get the response.
"""

import sys
import json
import os
import logging
import re

from global_bin_dir.environment import Environment
from global_bin_dir.exceptions import GlobalBinDirError
from global_bin_dir.resolver import GlobalBinDirResolver
from global_bin_dir import RPC_PROTOCOL_VERSION as global_bin_dir_protocol_version

log_level = int(os.environ.get("GLOBAL_BIN_DIR_LOG_LEVEL", logging.INFO))

# Write output to stderr because stdout is used for command response
logging.basicConfig(stream=sys.stderr, level=log_level, format="%(message)s")

LOG = logging.getLogger(__name__)

VERSION_REGEX = re.compile("^([0-9])+.([0-9]+)$")


def _success_response(request_id, global_bin_dir):
    return json.dumps({"jsonrpc": "2.0", "id": request_id, "result": {"global_bin_dir": global_bin_dir}})


def _error_response(request_id, http_status_code, message, data=None):
    error = {"code": http_status_code, "message": message}
    if data:
        error["data"] = data
    return json.dumps({"jsonrpc": "2.0", "id": request_id, "error": error})


def _parse_version(version_string):

    if version_string and VERSION_REGEX.match(version_string):
        return float(version_string)
    else:
        ex = "Protocol Version does not match : {}".format(VERSION_REGEX.pattern)
        LOG.debug(ex)
        raise ValueError(ex)


def version_compatibility_check(version):
    # Requests made with a newer protocol than this library speaks are rejected.
    # 0.1 < 0.1 fails, the request is accepted.
    # 0.1 < 0.2 passes, a ValueError is raised.

    if _parse_version(global_bin_dir_protocol_version) < version:
        ex = "Incompatible Protocol Version : {}, " "Current Protocol Version: {}".format(
            version, global_bin_dir_protocol_version
        )
        LOG.error(ex)
        raise ValueError(ex)


def _write_response(response, exit_code):
    sys.stdout.write(response)
    sys.stdout.flush()  # Make sure it is written
    sys.exit(exit_code)


def main():
    """
    Implementation of CLI Interface. Handles only one JSON-RPC method at a time and responds with data

    Input is passed as JSON string either through stdin or as the first argument to the command. Output is always
    printed to stdout.
    """

    if len(sys.argv) > 1:
        request_str = sys.argv[1]
        LOG.debug("Using the request object from command line argument")
    else:
        LOG.debug("Reading the request object from stdin")
        request_str = sys.stdin.read()

    request = json.loads(request_str)
    request_id = request["id"]
    params = request.get("params", {})

    # Currently, this is the only supported method
    if request["method"] != "GlobalBinDir.resolve":
        response = _error_response(request_id, -32601, "Method unavailable")
        return _write_response(response, 1)

    try:
        protocol_version = _parse_version(params.get("__protocol_version"))
        version_compatibility_check(protocol_version)

    except ValueError:
        response = _error_response(request_id, 505, "Unsupported Protocol Version")
        return _write_response(response, 1)

    should_allow_write = params.get("should_allow_write", True)
    if not isinstance(should_allow_write, bool):
        response = _error_response(request_id, 400, "should_allow_write must be a boolean")
        return _write_response(response, 1)

    exit_code = 0
    response = None

    try:
        resolver = GlobalBinDirResolver(environment=Environment.from_os(pnpm_home=params.get("pnpm_home")))
        global_bin_dir = resolver.resolve(
            known_suitable_dirs=params.get("known_suitable_dirs", []),
            should_allow_write=should_allow_write,
        )

        response = _success_response(request_id, global_bin_dir)

    except GlobalBinDirError as ex:
        LOG.debug("Resolving the global bin directory failed", exc_info=ex)
        exit_code = 1
        response = _error_response(request_id, 400, str(ex), data={"code": ex.code, "hint": ex.hint})

    except Exception as ex:
        LOG.debug("Resolver crashed", exc_info=ex)
        exit_code = 1
        response = _error_response(request_id, 500, str(ex))

    _write_response(response, exit_code)


if __name__ == "__main__":
    main()
