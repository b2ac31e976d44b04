import unittest
from unittest import mock

from click.testing import CliRunner

from phraseclock.cmds import spell  # noqa
from phraseclock.main import cli


class TestSpellCommand(unittest.TestCase):
    """Unit tests for the spell command."""

    def setUp(self):
        patcher = mock.patch("phraseclock.log.log.setup_logging")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.runner = CliRunner()

    def test_spell(self):
        result = self.runner.invoke(
            cli, ["spell", "1", "21", "101"], catch_exceptions=False,
        )
        assert result.exit_code == 0
        self.assertEqual(
            ["one", "twenty one", "one hundred one"],
            result.output.splitlines(),
        )

    def test_spell_negative(self):
        result = self.runner.invoke(
            cli, ["spell", "--", "-5"], catch_exceptions=False,
        )
        assert result.exit_code == 0
        self.assertEqual(["minus five"], result.output.splitlines())

    def test_too_big(self):
        result = self.runner.invoke(
            cli, ["spell", "1000000000000"], catch_exceptions=False,
        )
        assert result.exit_code == 1
        assert "not supported" in result.output

    def test_no_numbers(self):
        result = self.runner.invoke(cli, ["spell"], catch_exceptions=False)
        assert result.exit_code == 2
