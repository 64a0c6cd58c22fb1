#!/usr/bin/env python3
"""
Entry point for running principles as a module: python -m principles
"""

import sys

from principles.main import main


if __name__ == '__main__':
    sys.exit(main())
