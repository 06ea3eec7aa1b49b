"""Test configuration for pytest.

This module imports fixtures that should be available to all tests.
"""

# Import fixtures
from tests.fixtures.common import (  # noqa
    clear_settings_cache,
    restore_root_logging,
    analyzer,
    launch_time,
    now,
    healthy_launch,
    verified_audit,
    healthy_metrics,
    risky_launch,
    risky_audit,
    risky_metrics,
    sample_document,
)
