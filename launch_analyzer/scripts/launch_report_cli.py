#!/usr/bin/env python3
"""
CLI tool to analyze a token launch described in a JSON document.

Usage:
    launch-analyzer launch.json [--json] [--investment 500]
    cat launch.json | python -m launch_analyzer

The document holds ``launch``, ``audit`` and ``metrics`` objects, plus
optional ``market_conditions`` (or ``marketConditions``) and ``historical``.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from launch_analyzer.config import get_settings
from launch_analyzer.logging_config import configure_logging, get_logger
from launch_analyzer.models import LaunchReport
from launch_analyzer.token_launch_analyzer import TokenLaunchAnalyzer
from launch_analyzer.utils.errors import InputFileError, LaunchAnalyzerError

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED_ERROR = 1
EXIT_INVALID_INPUT = 2


def load_document(path: Optional[str]) -> Dict[str, Any]:
    """Read the input document from a file, or stdin when path is None or "-".

    Raises:
        InputFileError: If the file cannot be read or is not a JSON object
    """
    try:
        if path is None or path == "-":
            document = json.load(sys.stdin)
        else:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
    except OSError as e:
        raise InputFileError(f"Cannot read input file: {e}", path=path) from e
    except json.JSONDecodeError as e:
        raise InputFileError(f"Input is not valid JSON: {e}", path=path) from e

    if not isinstance(document, dict):
        raise InputFileError("Input document must be a JSON object", path=path)

    missing = [key for key in ("launch", "audit", "metrics") if key not in document]
    if missing:
        raise InputFileError(f"Input document is missing: {', '.join(missing)}", path=path)

    return document


def analyze_document(document: Dict[str, Any], investment_amount: float,
                     analyzer: TokenLaunchAnalyzer) -> LaunchReport:
    """Build the launch report for a loaded input document."""
    market_conditions = document.get("market_conditions", document.get("marketConditions"))
    return analyzer.build_report(
        document["launch"],
        document["audit"],
        document["metrics"],
        market_conditions=market_conditions,
        investment_amount=investment_amount,
        historical_data=document.get("historical"),
    )


def format_report(report: LaunchReport) -> List[str]:
    """Render a launch report as human-readable lines."""
    analysis = report.analysis
    rug_pull = report.rug_pull
    prediction = report.prediction
    strategy = report.trading_strategy

    lines = [
        "=" * 80,
        f"LAUNCH ANALYSIS FOR {report.symbol}",
        "=" * 80,
        f"Token address: {report.token_address}",
        f"Overall score: {analysis.overall_score:.1f}/100",
        f"Legitimacy score: {analysis.legitimacy_score:.1f}",
        f"Potential score: {analysis.potential_score:.1f}",
        f"Risk level: {analysis.risk_level.value}",
        f"Recommendation: {analysis.recommendation.value}",
        f"Confidence: {analysis.confidence_level:.0f}%",
    ]

    if analysis.red_flags:
        lines.append("\nRED FLAGS:")
        for flag in analysis.red_flags:
            lines.append(f"- [{flag.severity.value}] {flag.description} ({flag.impact})")

    if analysis.green_flags:
        lines.append("\nGREEN FLAGS:")
        for flag in analysis.green_flags:
            lines.append(f"- [{flag.importance.value}] {flag.description}")

    lines.append(f"\nRug pull probability: {rug_pull.probability:.0f}% ({rug_pull.timeframe})")
    for indicator in rug_pull.indicators:
        lines.append(f"- {indicator}")

    if report.honeypot_indicators:
        lines.append(f"\nHoneypot indicators: {', '.join(report.honeypot_indicators)}")

    lines.extend([
        f"\nSuccess probability: {prediction.success_probability:.1f}%",
        f"Expected return: {prediction.expected_return:+.0f}%",
        f"Expected price range: {prediction.expected_price_range.min:.8g} - "
        f"{prediction.expected_price_range.max:.8g}",
        f"Time to ATH: {prediction.time_to_ath}h",
    ])

    if report.historical_comparison is not None:
        comparison = report.historical_comparison
        lines.extend([
            f"\nSimilar historical launches: {comparison.similar_launches}",
            f"Success rate: {comparison.average_outcome.success_rate:.1f}%",
            f"Ranking: {comparison.ranking}",
        ])

    lines.extend([
        "\nSTRATEGY:",
        f"Entry: {strategy.entry_strategy.timing} "
        f"(allocation {strategy.entry_strategy.allocation:,.2f})",
    ])
    for level in strategy.exit_strategy.take_profit:
        lines.append(f"- Take profit {level.percentage:.0f}% at {level.price:.8g}")
    stop_loss = strategy.exit_strategy.stop_loss
    lines.append(f"- Stop loss {stop_loss.percentage:.0f}% at {stop_loss.price:.2f}x")
    for rule in strategy.risk_management:
        lines.append(f"- {rule}")

    lines.append("\nALERTS:")
    for alert in report.monitoring_alerts:
        lines.append(f"- [{alert.type.value}] {alert.condition}: {alert.action}")

    lines.append("=" * 80)
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launch-analyzer",
        description="Analyze a token launch for legitimacy, rug pull risk and potential"
    )
    parser.add_argument("input", nargs="?", default=None,
                        help="Path to the JSON input document (default: stdin)")
    parser.add_argument("--json", action="store_true", help="Output results in JSON format")
    parser.add_argument("--investment", type=float, default=None,
                        help="Investment amount for the trading strategy")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Log level (default: LAUNCH_ANALYZER_LOG_LEVEL or INFO)")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, analyze the input document and print the report.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        configure_logging(
            log_level=args.log_level or settings.LOG_LEVEL,
            log_format=settings.LOG_FORMAT,
            structured=settings.STRUCTURED_LOGGING,
        )

        investment = settings.DEFAULT_INVESTMENT if args.investment is None else args.investment
        document = load_document(args.input)
        report = analyze_document(document, investment, TokenLaunchAnalyzer.from_settings(settings))
    except LaunchAnalyzerError as e:
        logger.error(f"Analysis failed: {e.message}")
        error = e.to_response().model_dump()
        print(json.dumps({"success": False, "error": error}, indent=2), file=sys.stderr)
        return EXIT_INVALID_INPUT
    except Exception as e:
        logger.exception("Unexpected error during analysis")
        print(f"Error: Unexpected error: {e}", file=sys.stderr)
        return EXIT_UNEXPECTED_ERROR

    if args.json:
        print(json.dumps(report.to_json_dict(), indent=2))
    else:
        print("\n".join(format_report(report)))

    return EXIT_OK


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
