"""Token Launch Analyzer Package.

This package evaluates new token launches: it scores legitimacy and
potential from contract audits and on-chain metrics, estimates rug pull
risk, predicts launch performance and derives trading strategies and
monitoring alerts.
"""

import logging

from launch_analyzer.token_launch_analyzer import (
    LAUNCH_RULES,
    LaunchRule,
    TokenLaunchAnalyzer,
    token_launch_analyzer,
)
from launch_analyzer.utils.errors import (
    ConfigurationError,
    LaunchAnalyzerError,
    ValidationError,
)

__version__ = "0.1.0"
__author__ = "Launch Analyzer Contributors"
__email__ = "maintainers@launch-analyzer.dev"

logger = logging.getLogger(__name__)

__all__ = [
    "LAUNCH_RULES",
    "ConfigurationError",
    "LaunchAnalyzerError",
    "LaunchRule",
    "TokenLaunchAnalyzer",
    "ValidationError",
    "token_launch_analyzer",
]
