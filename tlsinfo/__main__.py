"""
tlsinfo Entry Point
====================

Allows running the CLI via: python -m tlsinfo
"""

from tlsinfo.cli import main

if __name__ == "__main__":
    main()
