"""
Run with: python -m epicycles
"""
import sys

from epicycles.main import main

if __name__ == "__main__":
    sys.exit(main())
