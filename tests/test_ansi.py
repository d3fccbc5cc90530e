"""Regression tests for ANSI width measurement and clipping.

These cases protect row alignment when escapes and wide chars are present.
"""

import unittest

from lazyedit import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_escapes_do_not_count(self) -> None:
        self.assertEqual(ansi_mod.display_width("\x1b[1;34mabc\x1b[0m"), 3)

    def test_wide_chars_take_two_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("日本"), 4)

    def test_tabs_expand_to_next_stop(self) -> None:
        self.assertEqual(ansi_mod.display_width("ab\tc"), 9)


class ClipAndFitTests(unittest.TestCase):
    def test_clip_preserves_escapes(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("\x1b[7mabcdef", 3), "\x1b[7mabc")

    def test_clip_does_not_split_wide_char(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("a日本", 2), "a")

    def test_fit_pads_short_text(self) -> None:
        self.assertEqual(ansi_mod.fit_ansi_line("ab", 4), "ab  ")

    def test_fit_with_zero_width_is_empty(self) -> None:
        self.assertEqual(ansi_mod.fit_ansi_line("ab", 0), "")


if __name__ == "__main__":
    unittest.main()
