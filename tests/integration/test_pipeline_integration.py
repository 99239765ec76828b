"""End-to-end tests: CSV file to report directory."""

import pytest

from testrun_reporter import load_source_lines, parse_records, summarize, write_reports
from testrun_reporter.models.test_record import TestStatus


@pytest.fixture
def results_csv(tmp_path):
    csv_file = tmp_path / "results.csv"
    csv_file.write_text(
        "\n"
        "id , name , status , duration\n"
        "T1,Login,PASSED,1.0\n"
        "\n"
        "T2,Checkout,FAILED,3.0\n"
        "T3,Search,passed,2.0\n"
        "T4,Export,SKIPPED,0.5\n"
        "T5,Import,PASSED,-2\n"
        "T6;Broken;PASSED;1\n"
        "T7,Report,FAILED,\n",
        encoding="utf-8",
    )
    return csv_file


class TestPipeline:
    """Run the whole batch the way the CLI does."""

    def test_full_run(self, results_csv, tmp_path):
        lines = load_source_lines(results_csv).unwrap()
        result = parse_records(lines, skip_header=True)
        snapshot = summarize(result.records)
        paths = write_reports(result.records, result.errors, tmp_path / "out", snapshot=snapshot)

        assert [r.id for r in result.records] == ["T1", "T2", "T3", "T4"]
        assert [(e.line_number, e.message) for e in result.errors] == [
            (8, "negative duration"),
            (9, "wrong column count"),
            (10, "invalid duration"),
        ]
        assert len(result.records) + len(result.errors) + len(result.skipped_lines) == len(lines)

        assert snapshot.count(TestStatus.PASSED) == 2
        assert snapshot.average_duration == pytest.approx(1.625)
        assert snapshot.slowest.id == "T2"

        summary = paths.summary.read_text(encoding="utf-8")
        assert "PASSED: 2 (50.00%)" in summary
        assert "Slowest: T2,Checkout,FAILED,3.000" in summary
        assert paths.errors.read_text(encoding="utf-8").splitlines()[1] == "9: wrong column count -> T6;Broken;PASSED;1"

    def test_header_never_reported(self, tmp_path):
        csv_file = tmp_path / "header_only.csv"
        csv_file.write_text("cabecera1,cabecera2,cabecera3,cabecera4\nT1,Login,PASSED,1.0\n", encoding="utf-8")

        result = parse_records(load_source_lines(csv_file).unwrap(), skip_header=True)
        paths = write_reports(result.records, result.errors, tmp_path / "out")

        assert result.errors == ()
        assert len(paths.records.read_text(encoding="utf-8").splitlines()) == 2
