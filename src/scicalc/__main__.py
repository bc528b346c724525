"""
Entry point for the scicalc CLI.

Usage:
    python -m scicalc eval "2 + 3 * 4"
"""

from .cli import main

if __name__ == "__main__":
    main()
