"""Conditional question logic engine for survey builders."""

__version__ = "1.0.0"
