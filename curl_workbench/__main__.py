"""
Package entry point.

Allows running: python -m curl_workbench parse "curl https://example.com"
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
