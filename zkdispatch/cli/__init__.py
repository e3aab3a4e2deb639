"""CLI module for zkdispatch."""
