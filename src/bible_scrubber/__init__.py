"""Chapter navigation and scrubber model for a Bible reader."""

__version__ = "0.1.0"
