"""readmegen — generate a project README from a directory snapshot."""

__version__ = "0.1.0"
