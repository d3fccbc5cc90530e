"""Input dialog state machine tests: modes, cursor bounds, and outcomes."""

from __future__ import annotations

import unittest

from lazyedit.dialog import DialogLayout, FieldEditing, InputDialog, SuggestionSelected
from lazyedit.input import keys


class _RecordingContext:
    def __init__(self) -> None:
        self.results: list[str] = []
        self.dialogs: list[InputDialog] = []

    def show_result(self, message: str) -> None:
        self.results.append(message)

    def show_dialog(self, dialog: InputDialog) -> None:
        self.dialogs.append(dialog)


class _Calls:
    def __init__(self) -> None:
        self.commit: list[str] = []
        self.yes: list[str] = []
        self.no: list[str] = []

    def layout(self, **kwargs) -> DialogLayout:
        return DialogLayout(
            prompt=kwargs.pop("prompt", "Open"),
            commit=lambda _ctx, value: self.commit.append(value),
            yes=lambda _ctx, value: self.yes.append(value),
            no=lambda _ctx, value: self.no.append(value),
            **kwargs,
        )


class DialogConstructionTests(unittest.TestCase):
    def test_empty_value_with_options_starts_on_first_suggestion(self) -> None:
        dialog = InputDialog(DialogLayout(prompt="Open", value="", options=["main.cpp", "main.rs"]))

        self.assertEqual(dialog.mode, SuggestionSelected(0))
        self.assertEqual(dialog.value, "main.cpp")
        self.assertIsNone(dialog.cursor_pos)

    def test_prefilled_value_starts_field_editing_at_end(self) -> None:
        dialog = InputDialog(DialogLayout(prompt="Open", value="abc", options=["x"]))

        self.assertEqual(dialog.mode, FieldEditing(3))

    def test_empty_value_without_options_starts_field_editing(self) -> None:
        dialog = InputDialog(DialogLayout(prompt="Open"))

        self.assertEqual(dialog.mode, FieldEditing(0))

    def test_show_hands_dialog_to_host(self) -> None:
        ctx = _RecordingContext()

        dialog = InputDialog.show(DialogLayout(prompt="Find"), ctx)

        self.assertEqual(ctx.dialogs, [dialog])
        self.assertEqual(dialog.title(), "Find")


class FieldEditingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = _RecordingContext()
        self.calls = _Calls()

    def test_left_and_right_clamp_cursor(self) -> None:
        dialog = InputDialog(self.calls.layout(value="ab"))

        dialog.process(self.ctx, keys.RIGHT)
        self.assertEqual(dialog.cursor_pos, 2)
        for _ in range(3):
            dialog.process(self.ctx, keys.LEFT)
        self.assertEqual(dialog.cursor_pos, 0)
        dialog.process(self.ctx, keys.RIGHT)
        self.assertEqual(dialog.cursor_pos, 1)

    def test_insert_at_cursor(self) -> None:
        dialog = InputDialog(self.calls.layout(value="ac"))
        dialog.process(self.ctx, keys.LEFT)

        result = dialog.process(self.ctx, "b")

        self.assertTrue(result.keep_running)
        self.assertTrue(result.repaint)
        self.assertEqual(dialog.value, "abc")
        self.assertEqual(dialog.cursor_pos, 2)

    def test_digits_are_text_while_editing(self) -> None:
        dialog = InputDialog(self.calls.layout(value="v", options=["a"]))

        result = dialog.process(self.ctx, "1")

        self.assertTrue(result.keep_running)
        self.assertEqual(dialog.value, "v1")
        self.assertEqual(self.calls.commit, [])

    def test_backspace_deletes_before_cursor(self) -> None:
        dialog = InputDialog(self.calls.layout(value="abc"))
        dialog.process(self.ctx, keys.LEFT)

        dialog.process(self.ctx, keys.BACKSPACE)

        self.assertEqual(dialog.value, "ac")
        self.assertEqual(dialog.cursor_pos, 1)

    def test_backspace_at_start_is_noop(self) -> None:
        dialog = InputDialog(self.calls.layout(value="ab"))
        dialog.process(self.ctx, keys.LEFT)
        dialog.process(self.ctx, keys.LEFT)

        dialog.process(self.ctx, keys.BACKSPACE)

        self.assertEqual(dialog.value, "ab")
        self.assertEqual(dialog.cursor_pos, 0)

    def test_delete_forward_removes_char_at_cursor(self) -> None:
        dialog = InputDialog(self.calls.layout(value="abc"))
        dialog.process(self.ctx, keys.LEFT)
        dialog.process(self.ctx, keys.LEFT)

        dialog.process(self.ctx, keys.DELETE)
        self.assertEqual(dialog.value, "ac")
        self.assertEqual(dialog.cursor_pos, 1)

        dialog.process(self.ctx, keys.RIGHT)
        dialog.process(self.ctx, keys.DELETE)
        self.assertEqual(dialog.value, "ac")

    def test_up_is_noop_and_down_selects_first_option(self) -> None:
        dialog = InputDialog(self.calls.layout(value="x", options=["one", "two"]))

        dialog.process(self.ctx, keys.UP)
        self.assertEqual(dialog.mode, FieldEditing(1))

        dialog.process(self.ctx, keys.DOWN)
        self.assertEqual(dialog.mode, SuggestionSelected(0))
        self.assertEqual(dialog.value, "one")

    def test_down_without_options_is_noop(self) -> None:
        dialog = InputDialog(self.calls.layout(value="x"))

        result = dialog.process(self.ctx, keys.DOWN)

        self.assertEqual(dialog.mode, FieldEditing(1))
        self.assertTrue(result.keep_running)

    def test_non_printable_keys_are_ignored(self) -> None:
        dialog = InputDialog(self.calls.layout(value="x"))

        result = dialog.process(self.ctx, keys.TAB)

        self.assertTrue(result.keep_running)
        self.assertEqual(dialog.value, "x")


class SuggestionSelectedTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = _RecordingContext()
        self.calls = _Calls()

    def _dialog(self, options: list[str]) -> InputDialog:
        return InputDialog(self.calls.layout(options=options))

    def test_down_is_clamped_at_last_option(self) -> None:
        dialog = self._dialog(["main.cpp", "main.rs"])
        dialog.process(self.ctx, keys.DOWN)
        self.assertEqual(dialog.mode, SuggestionSelected(1))

        result = dialog.process(self.ctx, keys.DOWN)

        self.assertEqual(dialog.mode, SuggestionSelected(1))
        self.assertEqual(dialog.value, "main.rs")
        self.assertFalse(result.repaint)

    def test_up_walks_back_then_returns_to_field(self) -> None:
        dialog = self._dialog(["a", "bb"])
        dialog.process(self.ctx, keys.DOWN)

        dialog.process(self.ctx, keys.UP)
        self.assertEqual(dialog.mode, SuggestionSelected(0))
        self.assertEqual(dialog.value, "a")

        dialog.process(self.ctx, keys.UP)
        self.assertEqual(dialog.mode, FieldEditing(1))

    def test_backspace_switches_to_field_without_deleting(self) -> None:
        dialog = self._dialog(["main.cpp", "main.rs"])
        dialog.process(self.ctx, keys.DOWN)

        dialog.process(self.ctx, keys.BACKSPACE)

        self.assertEqual(dialog.mode, FieldEditing(len("main.rs")))
        self.assertEqual(dialog.value, "main.rs")

    def test_delete_forward_switches_to_field_without_deleting(self) -> None:
        dialog = self._dialog(["main.cpp"])

        dialog.process(self.ctx, keys.DELETE)

        self.assertEqual(dialog.mode, FieldEditing(8))
        self.assertEqual(dialog.value, "main.cpp")

    def test_left_moves_cursor_to_end_and_right_to_start(self) -> None:
        dialog = self._dialog(["abc"])
        dialog.process(self.ctx, keys.LEFT)
        self.assertEqual(dialog.mode, FieldEditing(3))

        other = self._dialog(["abc"])
        other.process(self.ctx, keys.RIGHT)
        self.assertEqual(other.mode, FieldEditing(0))

    def test_printable_switches_to_field_then_inserts(self) -> None:
        dialog = self._dialog(["main.cpp"])

        dialog.process(self.ctx, "x")

        self.assertEqual(dialog.value, "main.cppx")
        self.assertEqual(dialog.mode, FieldEditing(9))

    def test_digit_selects_and_commits_once(self) -> None:
        dialog = self._dialog(["a", "b", "c"])

        result = dialog.process(self.ctx, "1")

        self.assertFalse(result.keep_running)
        self.assertEqual(self.calls.commit, ["b"])
        self.assertEqual(dialog.outcome, "commit")

        again = dialog.process(self.ctx, "2")
        self.assertFalse(again.keep_running)
        self.assertEqual(self.calls.commit, ["b"])

    def test_out_of_range_digit_commits_current_value(self) -> None:
        dialog = self._dialog(["a", "b"])

        dialog.process(self.ctx, "7")

        self.assertEqual(self.calls.commit, ["a"])

    def test_select_suggestion_ignores_out_of_range_and_repeats(self) -> None:
        dialog = self._dialog(["a", "b"])
        dialog.dirty = False

        dialog.select_suggestion(0)
        self.assertFalse(dialog.dirty)
        dialog.select_suggestion(5)
        self.assertEqual(dialog.mode, SuggestionSelected(0))
        dialog.select_suggestion(1)
        self.assertTrue(dialog.dirty)
        self.assertEqual(dialog.value, "b")


class DialogTerminationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = _RecordingContext()
        self.calls = _Calls()

    def test_return_commits_value_when_shown(self) -> None:
        dialog = InputDialog(self.calls.layout(value="notes.txt"))

        result = dialog.process(self.ctx, keys.RETURN)

        self.assertFalse(result.keep_running)
        self.assertEqual(self.calls.commit, ["notes.txt"])

    def test_enter_commits_selected_suggestion(self) -> None:
        dialog = InputDialog(self.calls.layout(options=["x", "y"]))
        dialog.process(self.ctx, keys.DOWN)

        dialog.process(self.ctx, keys.ENTER)

        self.assertEqual(self.calls.commit, ["y"])

    def test_return_is_ignored_for_yes_no_prompt(self) -> None:
        dialog = InputDialog(self.calls.layout(value="f", show_value=False))

        result = dialog.process(self.ctx, keys.RETURN)

        self.assertTrue(result.keep_running)
        self.assertEqual(self.calls.commit, [])

    def test_yes_and_no_keys_on_yes_no_prompt(self) -> None:
        for key, expected in (("Y", "yes"), ("y", "yes"), ("N", "no"), ("n", "no")):
            with self.subTest(key=key):
                calls = _Calls()
                dialog = InputDialog(calls.layout(value="target", show_value=False))

                result = dialog.process(self.ctx, key)

                self.assertFalse(result.keep_running)
                self.assertEqual(getattr(calls, expected), ["target"])
                self.assertEqual(calls.commit, [])

    def test_yes_key_is_text_when_value_is_shown(self) -> None:
        dialog = InputDialog(self.calls.layout(value=""))

        dialog.process(self.ctx, "y")

        self.assertEqual(dialog.value, "y")
        self.assertEqual(self.calls.yes, [])

    def test_escape_and_close_cancel_without_callbacks(self) -> None:
        for key in (keys.ESCAPE, keys.CLOSE):
            for options in ([], ["a", "b"]):
                with self.subTest(key=key, options=options):
                    calls = _Calls()
                    ctx = _RecordingContext()
                    dialog = InputDialog(calls.layout(options=options))

                    result = dialog.process(ctx, key)

                    self.assertFalse(result.keep_running)
                    self.assertEqual(ctx.results, ["Cancelled"])
                    self.assertEqual((calls.commit, calls.yes, calls.no), ([], [], []))
                    self.assertEqual(dialog.outcome, "cancelled")

    def test_help_items_depend_on_value_display(self) -> None:
        self.assertEqual(InputDialog(DialogLayout(prompt="p")).help_items(), [("^[", "Escape")])
        self.assertEqual(
            InputDialog(DialogLayout(prompt="p", show_value=False)).help_items(),
            [("Y", "Yes"), ("N", "No"), ("^[", "Escape")],
        )


if __name__ == "__main__":
    unittest.main()
