"""Durable memoization of sync and async function calls, kept in memory or SQLite."""

__version__ = "0.1.0"