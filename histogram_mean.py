#!/usr/bin/env python3
"""Script entry point.

Keeps the `python histogram_mean.py <counts...>` UX while the implementation
lives in the `histogram_mean` package.
"""

import sys

from histogram_mean.cli import main


if __name__ == '__main__':
    sys.exit(main())
