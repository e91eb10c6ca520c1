"""Shell front end: tokenizing, syntax checks, expansion, command building and lookup."""

__version__ = "0.1.0"