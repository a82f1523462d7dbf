"""Idea admission, answer validation and staged disclosure for idea assessments."""

__version__ = "0.1.0"
