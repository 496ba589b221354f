"""Permissive JavaScript lexing and HTML resource scanning for content rewriting."""

__version__ = "0.1.0"
