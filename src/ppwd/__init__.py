"""ppwd - prompt-friendly working directory"""

__version__ = "0.1.0"

from .compressor import PathCompressor, compress
from .config.settings import AppSettings, SettingsManager
from .errors import EnvironmentUnavailableError, InvalidArgumentError, PpwdError
from .utils import LoggingPathCompressor

__all__ = [
    "PathCompressor",
    "compress",
    "LoggingPathCompressor",
    "AppSettings",
    "SettingsManager",
    "PpwdError",
    "InvalidArgumentError",
    "EnvironmentUnavailableError",
]
