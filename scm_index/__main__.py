"""
Main entry point for the scm_index package.

Allows running the checks as: python -m scm_index
"""

import sys

from scm_index.cli import main

if __name__ == "__main__":
    sys.exit(main())
