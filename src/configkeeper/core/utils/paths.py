import os
import platform
from pathlib import Path

from configkeeper.core.utils.logger import log_debug

APP_NAME = "ConfigKeeper"
CONFIG_FILENAME = "config.xml"


def get_app_data_dir() -> Path:
    """Per-user application-data directory.

    ``CONFIGKEEPER_HOME`` overrides the platform default (tests point it at
    ``tmp_path``).
    """
    override = os.getenv("CONFIGKEEPER_HOME")
    if override:
        return Path(override).expanduser()
    system = platform.system()
    if system == "Windows":
        base = os.getenv("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / APP_NAME
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    base = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_NAME.lower()


def get_default_config_path() -> Path:
    return get_app_data_dir() / CONFIG_FILENAME


def ensure_app_data_dir() -> Path:
    """Create the application-data directory if it does not exist."""
    path = get_app_data_dir()
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        log_debug("paths", "Created application data directory", context=str(path))
    return path
