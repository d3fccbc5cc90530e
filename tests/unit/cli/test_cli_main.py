"""CLI entrypoint tests for argument handling and dispatch."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyedit import cli


class CliMainTests(unittest.TestCase):
    def test_missing_path_exits_with_message(self) -> None:
        with self.assertRaisesRegex(SystemExit, "Path not found"):
            cli.main(argv=["/definitely/not/here"])

    def test_non_interactive_stdin_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazyedit.cli.sys.stdin", **{"isatty.return_value": False}):
                with self.assertRaisesRegex(SystemExit, "interactive terminal"):
                    cli.main(argv=[tmp])

    def test_main_configures_logging_and_runs_shell(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "session.log"
            with mock.patch("lazyedit.cli.sys.stdin", **{"isatty.return_value": True}), mock.patch(
                "lazyedit.cli.configure_logging"
            ) as configure, mock.patch("lazyedit.cli.run_shell") as run:
                cli.main(
                    argv=[tmp, "--theme", "ocean", "--no-color", "--show-hidden", "--log-level", "debug", "--log-file", str(log_file)]
                )

        configure.assert_called_once_with(logging.DEBUG, log_file)
        run.assert_called_once_with(Path(tmp), theme_name="ocean", no_color=True, show_hidden=True)

    def test_default_path_used_when_argument_omitted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazyedit.cli.sys.stdin", **{"isatty.return_value": True}), mock.patch(
                "lazyedit.cli.configure_logging"
            ), mock.patch("lazyedit.cli.run_shell") as run:
                cli.main(default_path=Path(tmp), argv=[])

        self.assertEqual(run.call_args.args[0], Path(tmp))

    def test_invalid_log_level_is_rejected_by_parser(self) -> None:
        with mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit):
                cli.build_parser().parse_args(["--log-level", "loud"])


class LoggingSetupTests(unittest.TestCase):
    def test_configure_logging_writes_to_file_and_replaces_handler(self) -> None:
        from lazyedit.runtime.logging_setup import configure_logging

        with tempfile.TemporaryDirectory() as tmp:
            first = Path(tmp) / "one.log"
            second = Path(tmp) / "two.log"
            logger = configure_logging(logging.INFO, first)
            logger = configure_logging(logging.INFO, second)
            self.addCleanup(self._detach, logger)

            logging.getLogger("lazyedit.tests").info("hello")
            for handler in logger.handlers:
                handler.flush()

            self.assertEqual(len([h for h in logger.handlers if getattr(h, "_lazyedit_handler", False)]), 1)
            self.assertIn("hello", second.read_text(encoding="utf-8"))
            self._detach(logger)

    @staticmethod
    def _detach(logger: logging.Logger) -> None:
        for handler in list(logger.handlers):
            if getattr(handler, "_lazyedit_handler", False):
                logger.removeHandler(handler)
                handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


if __name__ == "__main__":
    unittest.main()
