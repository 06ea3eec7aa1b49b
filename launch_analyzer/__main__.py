"""Command-line entry point for the launch analyzer."""

import sys

from launch_analyzer.scripts.launch_report_cli import run


def main():
    """Run the launch report CLI."""
    sys.exit(run())


if __name__ == "__main__":
    main()
