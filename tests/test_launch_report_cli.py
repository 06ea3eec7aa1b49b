"""Tests for the launch report command-line tool."""

import io
import json

import pytest

from launch_analyzer.scripts.launch_report_cli import (
    EXIT_INVALID_INPUT,
    EXIT_OK,
    build_parser,
    load_document,
    run,
)
from launch_analyzer.utils.errors import ErrorCode, InputFileError


@pytest.fixture
def document_path(tmp_path, sample_document):
    path = tmp_path / "launch.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def cli_env(monkeypatch, restore_root_logging):
    for key in ("LAUNCH_ANALYZER_LOG_LEVEL", "LAUNCH_ANALYZER_STRUCTURED_LOGGING",
                "LAUNCH_ANALYZER_DEFAULT_INVESTMENT", "LAUNCH_ANALYZER_SIMILARITY_WINDOW",
                "LAUNCH_ANALYZER_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


# ===============================================================
# Input Loading Tests
# ===============================================================

def test_load_document(document_path, sample_document):
    assert load_document(str(document_path)) == sample_document


def test_load_document_from_stdin(monkeypatch, sample_document):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(sample_document)))

    assert load_document("-") == sample_document


def test_load_missing_file(tmp_path):
    with pytest.raises(InputFileError) as exc_info:
        load_document(str(tmp_path / "missing.json"))

    assert exc_info.value.code == ErrorCode.INVALID_INPUT_FILE
    assert exc_info.value.details["path"].endswith("missing.json")


@pytest.mark.parametrize("content,message", [
    ("{not json", "not valid JSON"),
    ("[1, 2]", "must be a JSON object"),
    ('{"launch": {}}', "missing: audit, metrics"),
])
def test_load_invalid_documents(tmp_path, content, message):
    path = tmp_path / "launch.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(InputFileError, match=message):
        load_document(str(path))


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.input is None
    assert args.json is False
    assert args.investment is None
    assert args.log_level is None


# ===============================================================
# Command Tests
# ===============================================================

def test_json_output(cli_env, document_path, capsys):
    exit_code = run([str(document_path), "--json", "--investment", "2000"])

    assert exit_code == EXIT_OK
    report = json.loads(capsys.readouterr().out)
    assert report["symbol"] == "HLTH"
    assert report["analysis"]["overallScore"] == pytest.approx(96)
    assert report["analysis"]["recommendation"] == "strong_buy"
    assert report["prediction"]["expectedReturn"] == 500
    assert report["tradingStrategy"]["entryStrategy"]["allocation"] == pytest.approx(1400)


def test_default_investment_from_environment(cli_env, document_path, capsys):
    cli_env.setenv("LAUNCH_ANALYZER_DEFAULT_INVESTMENT", "100")

    assert run([str(document_path), "--json"]) == EXIT_OK

    report = json.loads(capsys.readouterr().out)
    assert report["tradingStrategy"]["entryStrategy"]["allocation"] == pytest.approx(70)


def test_text_output(cli_env, document_path, capsys):
    exit_code = run([str(document_path)])

    assert exit_code == EXIT_OK
    out = capsys.readouterr().out
    assert "LAUNCH ANALYSIS FOR HLTH" in out
    assert "Risk level: very_low" in out
    assert "Recommendation: strong_buy" in out
    assert "GREEN FLAGS:" in out
    assert "- Take profit 30% at 1.5" in out
    assert "- Stop loss 100% at 0.70x" in out


def test_invalid_input_file(cli_env, tmp_path, capsys):
    exit_code = run([str(tmp_path / "missing.json")])

    assert exit_code == EXIT_INVALID_INPUT
    captured = capsys.readouterr()
    assert captured.out == ""
    assert '"code": "INVALID_INPUT_FILE"' in captured.err


def test_invalid_launch_data(cli_env, tmp_path, sample_document, capsys):
    sample_document["audit"]["sellTax"] = 250
    path = tmp_path / "launch.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")

    exit_code = run([str(path), "--json"])

    assert exit_code == EXIT_INVALID_INPUT
    assert '"code": "VALIDATION_ERROR"' in capsys.readouterr().err


def test_invalid_configuration(cli_env, document_path, capsys):
    cli_env.setenv("LAUNCH_ANALYZER_SIMILARITY_WINDOW", "-1")

    exit_code = run([str(document_path)])

    assert exit_code == EXIT_INVALID_INPUT
    assert '"code": "CONFIGURATION_ERROR"' in capsys.readouterr().err


def test_error_payload_shape(cli_env, tmp_path, capsys):
    path = tmp_path / "launch.json"
    path.write_text('{"launch": {}}', encoding="utf-8")

    assert run([str(path)]) == EXIT_INVALID_INPUT

    err = capsys.readouterr().err
    payload = json.loads(err[err.index("{\n"):])
    assert payload["success"] is False
    assert payload["error"] == {
        "code": "INVALID_INPUT_FILE",
        "message": "Input document is missing: audit, metrics",
        "details": {"path": str(path)},
    }
