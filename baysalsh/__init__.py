"""A small interactive shell with quoting, expansion, redirections and builtins."""

__version__ = "0.1.0"