"""Static analysis of assertion calls that omit a failure message."""

__version__ = "0.1.0"
