"""Exception definitions for steam-deploy API"""

from ..constants import ErrorCode


class SteamDeployError(Exception):
    """Base exception for steam-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(SteamDeployError):
    """Missing or invalid input, or no usable authentication strategy"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


class MissingInputError(ConfigError):
    """Required action input was not supplied"""

    def __init__(self, input_name: str):
        super().__init__(f"Input required and not supplied: {input_name}")
        self.input_name = input_name


class FileSystemError(SteamDeployError):
    """File could not be written or read back"""

    def __init__(self, message: str, path=None, error_code: str = ErrorCode.FILESYSTEM_ERROR):
        super().__init__(message, error_code)
        self.path = path


class ManifestError(FileSystemError):
    """Generated manifest could not be persisted"""

    def __init__(self, message: str, path=None):
        super().__init__(message, path, ErrorCode.MANIFEST_ERROR)


class ProcessError(SteamDeployError):
    """External client failed"""

    def __init__(self, message: str, exit_code: int = None):
        super().__init__(message, ErrorCode.PROCESS_FAILED)
        self.exit_code = exit_code
