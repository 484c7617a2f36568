"""Entry point for running xcdocs as a module.

Usage:
    python -m xcdocs
"""

from xcdocs.cli import main

if __name__ == "__main__":
    main()
