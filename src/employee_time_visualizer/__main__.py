"""
Package entry point for python -m execution.

USAGE:
    python -m employee_time_visualizer                    # Fetch, aggregate, render
    python -m employee_time_visualizer --output-dir out   # Write artifacts to ./out
"""

import sys

from employee_time_visualizer.cli import main

if __name__ == "__main__":
    sys.exit(main())
