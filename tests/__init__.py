"""Tests for the launch analyzer."""
