#!/usr/bin/env python3
"""
screensaver-any entry point for running as a module: python3 -m screensaver_any
"""

import sys
from screensaver_any.cli import main

if __name__ == '__main__':
    sys.exit(main())
