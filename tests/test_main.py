import json

import pytest
from unittest.mock import patch

from mdna_outlook.core.exceptions import FilingNotFoundError
from mdna_outlook.main import build_parser, main


class TestMain:

    @pytest.fixture
    def log_args(self, tmp_path):
        return ["--log-dir", str(tmp_path / "logs")]

    def test_parser_defaults(self):
        args = build_parser().parse_args([])

        assert args.file is None
        assert args.cik == "0000796343"
        assert args.form == "10-Q"
        assert not args.verbose

    def test_file_and_cik_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--file", "a.htm", "--cik", "320193"])

    def test_file_mode_writes_report(self, tmp_path, outlook_html, log_args):
        filing = tmp_path / "filing.htm"
        filing.write_text(outlook_html, encoding="utf-8")
        output = tmp_path / "report.json"

        exit_code = main(["--file", str(filing), "-o", str(output)] + log_args)

        assert exit_code == 0
        report = json.loads(output.read_text(encoding="utf-8"))
        assert report["confidence"] == "high"
        assert "We expect revenue to grow" in report["excerpt"]

    def test_file_mode_prints_json(self, tmp_path, mdna_only_html, log_args, capsys):
        filing = tmp_path / "filing.htm"
        filing.write_text(mdna_only_html, encoding="utf-8")

        assert main(["--file", str(filing)] + log_args) == 0

        report = json.loads(capsys.readouterr().out)
        assert report["confidence"] == "medium"

    def test_missing_file(self, tmp_path, log_args):
        assert main(["--file", str(tmp_path / "missing.htm")] + log_args) == 1

    def test_lookup_failure(self, log_args):
        error = FilingNotFoundError("0000796343", "10-Q")
        with patch("mdna_outlook.main.OutlookService.latest_outlook", side_effect=error) as latest:
            assert main(["--cik", "796343"] + log_args) == 1

        latest.assert_called_once_with("796343", "10-Q")
