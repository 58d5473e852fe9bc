"""A small command-line to-do list kept in a tab-separated text file."""

__version__ = "0.1.0"