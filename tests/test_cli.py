import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from wikify import cli
from wikify.config import DEFAULT_PAUSE_SECONDS, DEFAULT_USER_AGENT, DEFAULT_WIKI_BASE, USER_AGENT_ENV
from wikify.crawler import BatchSummary
from wikify.models import InputRecord


class TestParseArgs(unittest.TestCase):
    """
    Tests command-line parsing and config building.
    """

    def test_defaults(self) -> None:
        args = cli.parse_args([])
        self.assertEqual(args.pause, DEFAULT_PAUSE_SECONDS)
        self.assertEqual(args.wiki_base, DEFAULT_WIKI_BASE)
        self.assertIsNone(args.user_agent)
        self.assertFalse(args.verbose)

    def test_build_config(self) -> None:
        args = cli.parse_args(["--output", "out", "--pause", "2.5", "--user-agent", "Scanner/2.0 (me@example.org)"])
        with mock.patch.dict(os.environ, {}, clear=True):
            config = cli.build_config(args)
        self.assertEqual(config.output_root, Path("out").resolve())
        self.assertEqual(config.pause_seconds, 2.5)
        self.assertEqual(config.user_agent, "Scanner/2.0 (me@example.org)")

    def test_user_agent_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {USER_AGENT_ENV: "EnvScanner/1.0"}):
            self.assertEqual(cli.build_config(cli.parse_args([])).user_agent, "EnvScanner/1.0")
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(cli.build_config(cli.parse_args([])).user_agent, DEFAULT_USER_AGENT)


class TestMain(unittest.TestCase):

    def test_main_runs_batch_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            csv_path = Path(tmp) / "movies.csv"
            csv_path.write_text("movie_id,link\n1,https://en.wikipedia.org/wiki/A\n", encoding="utf-8")
            with mock.patch.object(cli, "_configure_logging"), \
                    mock.patch.object(cli, "run_batch", return_value=BatchSummary(total=1, saved=1)) as run_batch:
                cli.main(["--input", str(csv_path), "--output", tmp])

        records, config = run_batch.call_args.args
        self.assertEqual(records, [InputRecord(id=1, link="https://en.wikipedia.org/wiki/A")])
        self.assertEqual(config.output_root, Path(tmp).resolve())


if __name__ == '__main__':
    unittest.main()
