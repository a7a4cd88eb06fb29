"""Unix-style commands, text tools and an ANSI tokenizer, usable from Python."""

__version__ = "0.1.0"