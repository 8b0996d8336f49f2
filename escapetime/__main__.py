"""Expose escapetime command via ``python -m escapetime``."""
import sys
from .entry import main

if __name__ == '__main__':
    sys.exit(main())
