import json
import logging

import pytest

from eventcontent.main import USAGE, main
from eventcontent.utils.logging import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _detach_handlers():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture()
def cli_env(monkeypatch, project_root):
    monkeypatch.setenv("EVENTCONTENT_PROJECT_ROOT", str(project_root))
    return project_root


def test_unknown_command_prints_usage(capsys):
    assert main(["publish"]) == 1
    assert USAGE in capsys.readouterr().err


def test_missing_command_prints_usage(capsys):
    assert main([]) == 1
    assert USAGE in capsys.readouterr().err


def test_build_prints_confirmation(cli_env, capsys):
    assert main(["build"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Final JSON written to ")
    assert (cli_env / "data" / "events" / "generated" / "events.json").is_file()


def test_dump_to_stdout(cli_env, capsys):
    assert main(["dump"]) == 0
    dataset = json.loads(capsys.readouterr().out)
    assert [event["slug"] for event in dataset["events"]] == ["1", "2"]


def test_dump_then_translate(cli_env, tmp_path, capsys, make_payload):
    output = tmp_path / "source.json"
    assert main(["dump", "--output", str(output)]) == 0
    assert f"Source dataset written to {output}" in capsys.readouterr().out

    payload_file = tmp_path / "translated.json"
    payload_file.write_text(json.dumps(make_payload()), encoding="utf-8")
    assert main(["translate", "--input", str(payload_file)]) == 0
    assert capsys.readouterr().out.strip() == "English data regenerated in data/events/generated/."


def test_failure_reports_error(cli_env, tmp_path, capsys):
    payload_file = tmp_path / "broken.json"
    payload_file.write_text("[]", encoding="utf-8")

    assert main(["translate", "--input", str(payload_file)]) == 1
    assert capsys.readouterr().err.startswith("Error: Invalid translation payload")


def test_missing_input_file_reports_error(cli_env, tmp_path, capsys):
    assert main(["translate", "--input", str(tmp_path / "absent.json")]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


@pytest.mark.parametrize("argv", [["build", "extra"], ["build", "--force"], ["translate", "--input"]])
def test_malformed_command_line_prints_usage(argv, capsys):
    assert main(argv) == 1
    assert USAGE in capsys.readouterr().err


def test_verbose_failure_logs_error_details(cli_env, tmp_path, capsys, caplog):
    payload_file = tmp_path / "broken.json"
    payload_file.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
        assert main(["translate", "--input", str(payload_file), "-v"]) == 1

    assert "'error_type': 'PayloadError'" in caplog.text
    assert "Error: Translation payload must be valid JSON" in capsys.readouterr().err
