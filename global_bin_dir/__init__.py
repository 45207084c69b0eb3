"""
Picks the directory on PATH that should hold globally installed pnpm executables
"""

from global_bin_dir.resolver import GlobalBinDirResolver, resolve

# Changing version will trigger a new release!
# Please make the version change as the last step of your development.
__version__ = "1.0.0"
RPC_PROTOCOL_VERSION = "0.1"

__all__ = ["GlobalBinDirResolver", "resolve"]
