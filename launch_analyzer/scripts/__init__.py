"""Command-line tools for the launch analyzer."""
