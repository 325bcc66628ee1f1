"""Tests for the command line interface."""

import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from click.testing import CliRunner

from radixtree.cli import main
from radixtree.version import get_version


class TestCLI(unittest.TestCase):
    """Test the CLI."""

    def setUp(self) -> None:
        """Set up a file of entries and a runner."""
        self.directory = TemporaryDirectory()
        self.path = Path(self.directory.name).joinpath("words.json")
        self.path.write_text(
            json.dumps({"water": 1, "slow": 2, "slower": 3, "waste": 4, "watch": 5})
        )
        self.runner = CliRunner()

    def tearDown(self) -> None:
        """Tear down the temporary directory."""
        self.directory.cleanup()

    def test_version(self) -> None:
        """Test the version string."""
        self.assertIsInstance(get_version(), str)

    def test_dump(self) -> None:
        """Test drawing a tree with both encodings."""
        expected = "\n".join(
            [
                "root",
                "├── wa",
                "│   ├── t",
                "│   │   ├── er (water:1)",
                "│   │   └── ch (watch:5)",
                "│   └── ste (waste:4)",
                "└── slow (slow:2)",
                "    └── er (slower:3)",
            ]
        )
        for encoding in ["edge", "compact"]:
            with self.subTest(encoding=encoding):
                result = self.runner.invoke(main, ["dump", "--encoding", encoding, str(self.path)])
                self.assertEqual(0, result.exit_code, msg=result.output)
                self.assertEqual(expected, result.output.rstrip("\n"))

    def test_keys(self) -> None:
        """Test listing keys with a prefix."""
        result = self.runner.invoke(main, ["keys", "--prefix", "wat", str(self.path)])
        self.assertEqual(0, result.exit_code, msg=result.output)
        self.assertEqual(["watch", "water"], result.output.split())

        result = self.runner.invoke(main, ["keys", str(self.path)])
        self.assertEqual(5, len(result.output.split()))

    def test_lookup(self) -> None:
        """Test looking up present and absent keys."""
        result = self.runner.invoke(main, ["lookup", str(self.path), "slower"])
        self.assertEqual(0, result.exit_code, msg=result.output)
        self.assertEqual("3", result.output.strip())

        result = self.runner.invoke(main, ["lookup", str(self.path), "wa"])
        self.assertEqual(1, result.exit_code)
        self.assertIn("wa is not in", result.output)

    def test_check(self) -> None:
        """Test checking a tree built from a file."""
        result = self.runner.invoke(main, ["check", "--verbose", str(self.path)])
        self.assertEqual(0, result.exit_code, msg=result.output)
        self.assertEqual("ok", result.output.strip().splitlines()[-1])

    def test_tsv(self) -> None:
        """Test reading a TSV file."""
        path = self.path.with_suffix(".tsv")
        path.write_text("hello\tworld\nhe\tshe\n")
        result = self.runner.invoke(main, ["lookup", "--format", "tsv", str(path), "he"])
        self.assertEqual(0, result.exit_code, msg=result.output)
        self.assertEqual("she", result.output.strip())

    def test_malformed_file(self) -> None:
        """Test files that can't be read as entries."""
        for content, message in [
            ("12", "should contain a JSON object or a list of pairs"),
            ("{not json", "Expecting property name"),
        ]:
            with self.subTest(content=content):
                self.path.write_text(content)
                for command in ["dump", "keys", "check"]:
                    result = self.runner.invoke(main, [command, str(self.path)])
                    self.assertEqual(1, result.exit_code, msg=result.output)
                    self.assertIsInstance(result.exception, SystemExit)
                    self.assertIn("could not load", result.output)
                    self.assertIn(message, result.output)

    def test_missing_file(self) -> None:
        """Test a location that doesn't exist."""
        result = self.runner.invoke(main, ["dump", str(self.path.with_name("nope.json"))])
        self.assertNotEqual(0, result.exit_code)
