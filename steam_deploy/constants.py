"""Global constants for steam-deploy"""

from enum import Enum

APP_NAME = "steam-deploy"
LOG_FORMAT = "%(message)s"

# External client
DEFAULT_STEAMCMD = "steamcmd"
SHUTDOWN_ON_FAILED_COMMAND = ["+@ShutdownOnFailedCommand", "1"]
CMD_LOGIN = "+login"
CMD_SET_GUARD_CODE = "+set_steam_guard_code"
CMD_RUN_APP_BUILD = "+run_app_build"
CMD_WORKSHOP_BUILD_ITEM = "+workshop_build_item"
CMD_QUIT = "+quit"

# Scratch and state layout
SCRATCH_DIR_NAME = ".steamworks"
APP_BUILD_FILE = "app_build.vdf"
WORKSHOP_ITEM_FILE = "workshop_item.vdf"
SESSION_CONFIG_DIR = "config"
SESSION_CONFIG_FILE = "config.vdf"
LOGS_DIR = "logs"

# Steam Guard
GUARD_CODE_ALPHABET = "23456789BCDFGHJKMNPQRTVWXY"
GUARD_CODE_LENGTH = 5
GUARD_CODE_PERIOD = 30  # seconds

# Environment variables
ENV_STEAM_DIR = "STEAM_DIR"
ENV_RUNNER_TEMP = "RUNNER_TEMP"
ENV_WORKSPACE = "GITHUB_WORKSPACE"
ENV_RUNNER_DEBUG = "RUNNER_DEBUG"
ENV_STEAMCMD = "STEAMCMD"
ENV_INPUT_PREFIX = "INPUT_"

# Named action inputs
INPUT_NAMES = [
    "username",
    "password",
    "shared_secret",
    "config",
    "app_build",
    "workshop_item",
    "app_id",
    "content_root",
    "description",
    "workshop_item_id",
    "set_live",
    "depot_file_exclusions",
    "install_scripts",
    "depots",
]
LIST_INPUTS = ["depot_file_exclusions", "install_scripts", "depots"]


class PublishMode(Enum):
    BUILD_FROM_MANIFEST = "build_from_manifest"
    WORKSHOP_FROM_MANIFEST = "workshop_from_manifest"
    WORKSHOP_FROM_PARAMETERS = "workshop_from_parameters"
    BUILD_FROM_PARAMETERS = "build_from_parameters"


class AuthMode(Enum):
    SESSION_FILE = "session_file"
    CREDENTIALS = "credentials"


# Error codes
class ErrorCode:
    CONFIG_ERROR = "SD001"
    FILESYSTEM_ERROR = "SD002"
    MANIFEST_ERROR = "SD003"
    PROCESS_FAILED = "SD004"
