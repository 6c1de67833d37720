"""Outer surfaces for the textcheck engine: Flask JSON API (web.py) and CLI (__main__.py)."""
