"""Syntax-level types produced by the diagram parsers."""
