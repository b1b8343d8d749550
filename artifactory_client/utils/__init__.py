"""
Utility modules for artifactory-client operations.
"""

from .checksum import checksums_match, compute_md5
from .config_manager import ConfigManager, encode_credential
from .logger import setup_logging
from .path_utils import destination_directory, is_remote_source, normalize_remote_path, remove_partial_file
from .session import create_async_session

from . import constants
from . import error_handling

__all__ = [
    "checksums_match",
    "compute_md5",
    "ConfigManager",
    "encode_credential",
    "setup_logging",
    "destination_directory",
    "is_remote_source",
    "normalize_remote_path",
    "remove_partial_file",
    "create_async_session",
    "constants",
    "error_handling",
]
