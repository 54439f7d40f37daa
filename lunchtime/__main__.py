"""
Convenience entry point for running lunchtime directly.

Usage: python -m lunchtime [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
