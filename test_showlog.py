"""Checks for the showlog bar filter, history and file writer."""

from __future__ import annotations

import os
import tempfile
import unittest
from unittest.mock import patch

import config as cfg
import showlog


class ShowlogTests(unittest.TestCase):

    def setUp(self) -> None:
        showlog.clear()

    def test_lines_are_tagged_with_level_and_module(self) -> None:
        showlog.info("[TEST] hello")
        self.assertEqual(showlog.recent(1), ["[INFO test_showlog] [TEST] hello"])

    def test_module_named_like_the_logger_is_still_tagged(self) -> None:
        code = compile("showlog.info('[TEST] from a look-alike')", "midi_showlog.py", "exec")
        exec(code, {"showlog": showlog})
        self.assertEqual(showlog.recent(1), ["[INFO midi_showlog] [TEST] from a look-alike"])

    def test_bar_follows_log_level(self) -> None:
        with patch.object(cfg, "LOG_LEVEL", 1):
            showlog.info("quiet")
            self.assertEqual(showlog.last(), "")
            showlog.warn("loud")
            self.assertTrue(showlog.last().endswith("loud"))

    def test_debug_stays_off_the_bar(self) -> None:
        with patch.object(cfg, "DEBUG_LOG", False):
            showlog.debug("detail")
        self.assertEqual(showlog.last(), "")
        self.assertIn("detail", showlog.recent(1)[0])

    def test_back_to_back_duplicates_are_collapsed(self) -> None:
        showlog.info("same")
        showlog.info("same")
        self.assertEqual(len(showlog.recent()), 1)

    def test_blank_messages_are_dropped(self) -> None:
        showlog.info("   ")
        showlog.info(None)
        self.assertEqual(showlog.recent(), [])

    def test_error_appends_traceback(self) -> None:
        try:
            raise ValueError("bad")
        except ValueError as e:
            showlog.error("failed", exc=e)
        line = showlog.recent(1)[0]
        self.assertTrue(line.startswith("[ERROR test_showlog] failed"))
        self.assertIn("ValueError: bad", line)

    def test_file_writer(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "routing_log.txt")
            with patch.object(cfg, "LOG_FILE_ENABLED", True), patch.object(cfg, "LOG_FILE", path):
                showlog.warn("to file")
                showlog.flush(timeout=2.0)
            with open(path, encoding="utf-8") as f:
                self.assertIn("[WARN test_showlog] to file", f.read())


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
