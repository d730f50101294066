"""Prompt loops, choice menus and text parsers."""
