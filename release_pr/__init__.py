"""Release PR generator: batch merge pull requests across release branches."""

__version__ = "1.0.0"
