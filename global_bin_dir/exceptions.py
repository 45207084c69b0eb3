"""
Collection of public exceptions raised by this library
"""


class GlobalBinDirError(Exception):

    MESSAGE = ""
    CODE = "ERR_PNPM_GLOBAL_BIN_DIR"
    HINT = None

    def __init__(self, **kwargs):
        Exception.__init__(self, self.MESSAGE.format(**kwargs))
        self.kwargs = kwargs

    @property
    def code(self):
        return self.CODE

    @property
    def hint(self):
        if self.HINT is None:
            return None
        return self.HINT.format(**self.kwargs)


class NoSearchPathError(GlobalBinDirError):
    """
    Raised when the executable search path environment variable is not set at all
    """

    MESSAGE = (
        "Couldn't find a global directory for executables because "
        'the "{path_name}" environment variable is not set.'
    )
    CODE = "ERR_PNPM_NO_PATH_ENV"


class BinDirPermissionError(GlobalBinDirError):
    """
    Raised when a suitable directory was found but the process cannot write to it
    """

    MESSAGE = "No write access to {path}"

    @property
    def path(self):
        return self.kwargs["path"]


class PnpmHomePermissionError(BinDirPermissionError):
    """
    Raised when the pnpm home directory is on PATH but is not writable.
    Lower priority directories are never considered in this case.
    """

    MESSAGE = "The CLI has no write access to the pnpm home directory at {path}"
    CODE = "ERR_PNPM_NO_PNPM_HOME_WRITE_ACCESS"
    HINT = "Make {path} writable by the current user"


class GlobalBinDirPermissionError(BinDirPermissionError):
    """
    Raised when every suitable directory that exists is not writable
    """

    MESSAGE = "No write access to the found global executable directories"
    CODE = "ERR_PNPM_GLOBAL_BIN_DIR_PERMISSION"
    HINT = "The found directories:\n{found}"

    def __init__(self, path, dirs):
        super(GlobalBinDirPermissionError, self).__init__(path=path, dirs=dirs, found="\n".join(dirs))

    @property
    def dirs(self):
        return self.kwargs["dirs"]


class NoGlobalBinDirError(GlobalBinDirError):
    """
    Raised when no directory on PATH looks like a place for global executables
    """

    MESSAGE = "Couldn't find a suitable global executables directory."
    CODE = "ERR_PNPM_NO_GLOBAL_BIN_DIR"
    HINT = (
        "There should be a node, nodejs, npm, or pnpm directory "
        'in the "{path_name}" environment variable'
    )


class ProbeFailedError(GlobalBinDirError):
    """
    Raised when checking a directory fails for any reason other than the directory not existing
    """

    MESSAGE = "Failed to inspect {path}: {reason}"
    CODE = "ERR_PNPM_GLOBAL_BIN_DIR_PROBE"
