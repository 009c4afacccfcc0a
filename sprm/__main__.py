#!/usr/bin/env python3
"""
Module: sprm.__main__

This module allows the sprm package to be executed as a module using:
    python -m sprm
"""

import sys

from sprm.main import main

if __name__ == "__main__":
    sys.exit(main())
