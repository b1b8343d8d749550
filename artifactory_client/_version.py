"""Version information for artifactory-client."""

__version__ = "1.0.0"
