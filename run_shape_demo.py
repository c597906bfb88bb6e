"""
Shape Demo
==========

Describes five shapes, prints their summary statistics, then shows dispatch
through process_shape() on two standalone shapes.

Usage:
    python run_shape_demo.py
"""

import sys

from shapecalc.cli import main


if __name__ == "__main__":
    sys.exit(main())
