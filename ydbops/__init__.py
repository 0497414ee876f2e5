"""Helpers for YDB cluster maintenance: node targeting, version filters, profiles, maintenance tasks and help text."""

__version__ = "0.1.0"