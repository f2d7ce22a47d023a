"""Main entry point for the movie-cache CLI.

Usage:
    python -m moviecache --help
"""

from moviecache.cli import main

if __name__ == "__main__":
    main()
