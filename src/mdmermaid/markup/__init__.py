"""Markdown-to-markup stages: diagram extraction and block/inline transformation."""
