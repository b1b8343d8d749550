"""
Central constants for the artifactory-client package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# API Generations
# ============================================================================

# Servers at or above this version serve the API from the root path ("/")
MODERN_API_VERSION = 4

# Servers below MODERN_API_VERSION serve the API below a context path
LEGACY_API_VERSION = 3

# Default context path for legacy servers ("/artifactory/")
DEFAULT_CONTEXT = "artifactory"

# ============================================================================
# Endpoints (relative to the resolved API root)
# ============================================================================

SYSTEM_VERSION_ENDPOINT = "api/system/version"
STORAGE_ENDPOINT = "api/storage"

# ============================================================================
# API and Network Constants
# ============================================================================

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 120.0

# Connect timeout (seconds)
CONNECT_TIMEOUT = 10.0

# Maximum number of pooled connections
DEFAULT_MAX_CONNECTIONS = 100

# Chunk size for streamed uploads and downloads (bytes)
TRANSFER_CHUNK_SIZE = 65536

# Sources starting with one of these are streamed from a remote URL
REMOTE_SOURCE_PREFIXES = ("http://", "https://")

# Headers that must never be written to logs
SENSITIVE_HEADERS = ["authorization", "cookie", "x-jfrog-art-api"]

# ============================================================================
# File and Path Constants
# ============================================================================

# Default configuration file location
DEFAULT_CONFIG_PATH = "~/.config/artifactory/cli.toml"

# Configuration section holding client settings
CONFIG_SECTION = "cli"
