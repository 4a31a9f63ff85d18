"""
Strength Lab Entry Point
=========================

Allows running the CLI via: python -m strengthlab
"""

from strengthlab.cli import main

if __name__ == "__main__":
    main()
