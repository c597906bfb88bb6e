"""
shapecalc CLI - main entry point.

Runs the built-in shape demo. Takes no arguments and reads no environment
variables.
"""

import sys

from shapecalc.config import DemoConfig
from shapecalc.pipeline import DemoBuilder


def main() -> int:
    """Run the demo with the default configuration."""
    demo = DemoBuilder.from_config(DemoConfig()).build()
    demo.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
