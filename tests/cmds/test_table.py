import unittest
from unittest import mock

from click.testing import CliRunner

from phraseclock.cmds import table
from phraseclock.main import cli


class TestTableCommand(unittest.TestCase):
    """Unit tests for the table command."""

    def test_build_table(self):
        tbl = table.build_table(9, 15)
        self.assertEqual(4, tbl.row_count)
        self.assertEqual(["Time", "Lines", "Phrase"], [c.header for c in tbl.columns])

    @mock.patch("phraseclock.log.log.setup_logging")
    def test_table(self, mock_logging):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["table", "--hour", "9", "--minute-step", "15"],
            catch_exceptions=False,
        )
        assert result.exit_code == 0
        assert "09:15" in result.output
        assert "quarter" in result.output
        assert "nine o'clock" in result.output

    @mock.patch("phraseclock.log.log.setup_logging")
    def test_bad_hour(self, mock_logging):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["table", "--hour", "24"], catch_exceptions=False,
        )
        assert result.exit_code == 2
