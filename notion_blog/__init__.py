"""Configuration and comment embedding for a Notion-backed blog."""

__version__ = "0.1.0"
