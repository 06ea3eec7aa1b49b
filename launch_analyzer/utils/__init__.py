"""Utility modules for the launch analyzer."""
