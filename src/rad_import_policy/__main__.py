"""
Allow running the package as a module.

This module enables running the package with:
    python -m rad_import_policy

It simply delegates to the main() function from rad_import_policy.py.
"""

import sys

from .rad_import_policy import main

if __name__ == "__main__":
    sys.exit(main())
