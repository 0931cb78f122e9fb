"""
Entry point for running tagjson as a module.

Allows running the demo via:
    python -m tagjson
    uv run python -m tagjson
"""

from tagjson.demo import main

if __name__ == "__main__":
    main()
