import json

import pytest
import yaml
from click.testing import CliRunner

from testrun_reporter import cli as cli_module
from testrun_reporter.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def csv_with_header(tmp_path):
    csv_file = tmp_path / "tests.csv"
    csv_file.write_text(
        "idTest,nameTest,status,duration\n"
        "T1,Login,PASSED,1.5\n"
        "T2,Checkout,failed,2.25\n"
        "bad,line\n",
        encoding="utf-8",
    )
    return csv_file


def test_report_writes_all_files(runner, csv_with_header, tmp_path):
    out_dir = tmp_path / "out"

    result = runner.invoke(cli, ["report", str(csv_with_header), str(out_dir), "--skip-header"])

    assert result.exit_code == 0, result.output
    assert "Report generated at" in result.output
    assert "PASSED: 1 (50.00%)" in result.output
    assert "Invalid lines: 1" in result.output
    assert (out_dir / "summary.txt").exists()
    assert (out_dir / "errors.log").read_text(encoding="utf-8") == "4: wrong column count -> bad,line\n"

    table = (out_dir / "summary.csv").read_text(encoding="utf-8").splitlines()
    assert table == ["id,name,status,duration", "T1,Login,PASSED,1.500", "T2,Checkout,FAILED,2.250"]


def test_report_without_skip_header_flags_header(runner, csv_with_header, tmp_path):
    out_dir = tmp_path / "out"

    result = runner.invoke(cli, ["report", str(csv_with_header), str(out_dir)])

    assert result.exit_code == 0, result.output
    errors = (out_dir / "errors.log").read_text(encoding="utf-8").splitlines()
    assert errors[0].startswith("1: invalid status")
    assert len(errors) == 2


def test_report_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["report", str(tmp_path / "no_such_123.csv"), str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "CSV file does not exist" in result.output


def test_report_wrong_extension(runner, tmp_path):
    txt_file = tmp_path / "tests.txt"
    txt_file.write_text("T1,Login,PASSED,1.0\n", encoding="utf-8")

    result = runner.invoke(cli, ["report", str(txt_file), str(tmp_path / "out")])

    assert result.exit_code == 1
    assert ".csv extension" in result.output


def test_report_output_is_a_file(runner, tmp_path):
    csv_file = tmp_path / "tests.csv"
    csv_file.write_text("T1,Login,PASSED,1.0", encoding="utf-8")
    not_a_dir = tmp_path / "noDir.txt"
    not_a_dir.write_text("x", encoding="utf-8")

    result = runner.invoke(cli, ["report", str(csv_file), str(not_a_dir)])

    assert result.exit_code == 1
    assert "not a directory" in result.output


def test_report_reads_config_file(runner, csv_with_header, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.dump({"skip_header": True, "summary_filename": "overview.txt"}), encoding="utf-8")
    out_dir = tmp_path / "out"

    result = runner.invoke(cli, ["report", str(csv_with_header), str(out_dir), "--config", str(config_file)])

    assert result.exit_code == 0, result.output
    assert (out_dir / "overview.txt").exists()
    assert (out_dir / "errors.log").read_text(encoding="utf-8").count("\n") == 1


def test_report_opens_menu(runner, csv_with_header, tmp_path, monkeypatch):
    captured = {}

    class FakeMenu:
        def __init__(self, records, errors, out_dir):
            captured["records"] = records
            captured["errors"] = errors
            captured["out_dir"] = out_dir

        def run(self):
            captured["ran"] = True

    monkeypatch.setattr(cli_module, "SummaryMenu", FakeMenu)
    out_dir = tmp_path / "out"

    result = runner.invoke(cli, ["report", str(csv_with_header), str(out_dir), "--skip-header", "--menu"])

    assert result.exit_code == 0, result.output
    assert captured["ran"] is True
    assert len(captured["records"]) == 2
    assert len(captured["errors"]) == 1
    assert captured["out_dir"] == out_dir


def test_validate_writes_json(runner, csv_with_header, tmp_path):
    output = tmp_path / "validation.json"

    result = runner.invoke(cli, ["validate", str(csv_with_header), "--skip-header", "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "Found 1 invalid lines" in result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["valid"] is False
    assert data["record_count"] == 2
    assert data["issues"] == ["4: wrong column count -> bad,line"]
    assert data["summary"]["counts_by_status"] == {"PASSED": 1, "FAILED": 1, "SKIPPED": 0}


def test_validate_clean_file(runner, tmp_path):
    csv_file = tmp_path / "clean.csv"
    csv_file.write_text("T1,Login,PASSED,1.0\n", encoding="utf-8")

    result = runner.invoke(cli, ["validate", str(csv_file)])

    assert result.exit_code == 0
    assert "All lines are valid!" in result.output
    assert "100.0% pass rate" in result.output


def test_init_config(runner, tmp_path):
    target = tmp_path / "testrun_config.yaml"

    result = runner.invoke(cli, ["init-config", "--config-template", str(target)])

    assert result.exit_code == 0
    data = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert data["skip_header"] is False
    assert data["summary_filename"] == "summary.txt"
