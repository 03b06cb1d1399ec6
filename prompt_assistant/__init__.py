"""Chat with a language model inside a plain text document."""

__version__ = "0.1.0"
