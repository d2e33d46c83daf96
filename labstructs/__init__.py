"""Classic data structures, some kept in plain-text files, with a command shell and small exercises."""

__version__ = "0.1.0"