"""
tests/test_pipeline/test_cli.py - Tests for the helpshelf-pipeline commands.
"""

from __future__ import annotations

from click.testing import CliRunner

from helpshelf_pipeline.cli import main


def _invoke(*args: str):
    return CliRunner().invoke(main, ["--log-level", "ERROR", *args])


class TestBuildDataCommand:
    def test_success(self, sample_csv_path, tmp_path):
        out = tmp_path / "resources.json"
        result = _invoke("build-data", "--csv", str(sample_csv_path), "--out", str(out))

        assert result.exit_code == 0, result.output
        assert "Generated 4 resources" in result.output
        assert out.is_file()
        assert "Columns not found" not in result.output

    def test_dry_run(self, sample_csv_path, tmp_path):
        out = tmp_path / "resources.json"
        result = _invoke(
            "build-data", "--csv", str(sample_csv_path), "--out", str(out), "--dry-run"
        )

        assert result.exit_code == 0, result.output
        assert "Validated 4 resources" in result.output
        assert not out.exists()

    def test_missing_csv_exits_nonzero(self, tmp_path):
        missing = tmp_path / "approved.csv"
        result = _invoke("build-data", "--csv", str(missing), "--out", str(tmp_path / "r.json"))

        assert result.exit_code == 1
        assert "CSV file not found" in result.output
        assert "Export the approved resources sheet" in result.output

    def test_reports_missing_columns(self, tmp_path):
        csv_path = tmp_path / "approved.csv"
        csv_path.write_text(
            "Approved,Resource name,Link to the resource\nyes,Focus Timer,https://example.com\n",
            encoding="utf-8",
        )
        result = _invoke("build-data", "--csv", str(csv_path), "--out", str(tmp_path / "r.json"))

        assert result.exit_code == 0, result.output
        assert "Generated 1 resources" in result.output
        assert "Columns not found:" in result.output
        assert "Featured" in result.output


class TestStatusCommand:
    def test_missing_file(self, tmp_path):
        result = _invoke("status", "--path", str(tmp_path / "resources.json"))
        assert result.exit_code == 1
        assert "No resources file" in result.output

    def test_summarizes_built_file(self, sample_csv_path, tmp_path):
        out = tmp_path / "resources.json"
        _invoke("build-data", "--csv", str(sample_csv_path), "--out", str(out))

        result = _invoke("status", "--path", str(out))

        assert result.exit_code == 0, result.output
        assert "4 resources (1 featured)" in result.output
        assert "community" in result.output
        assert "physical" in result.output

    def test_corrupt_file(self, tmp_path):
        out = tmp_path / "resources.json"
        out.write_text("{not json", encoding="utf-8")
        result = _invoke("status", "--path", str(out))
        assert result.exit_code == 1
        assert "not valid JSON" in result.output
