"""
Entry point for running zkdispatch as a module: python -m zkdispatch
"""

from zkdispatch.cli.commands import app

if __name__ == "__main__":
    app()
