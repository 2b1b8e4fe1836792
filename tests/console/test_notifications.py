"""Tests for the console notifier."""

from backoffice.console.notifications import Notifier


class TestNotifier:
    def test_levels_and_last(self):
        notifier = Notifier()
        assert notifier.last is None
        notifier.success("Layout saved.")
        notifier.error("Error saving layout: boom")
        assert notifier.last.level == "error"
        assert notifier.messages("success") == ["Layout saved."]
        assert notifier.messages() == ["Layout saved.", "Error saving layout: boom"]

    def test_history_is_bounded(self):
        notifier = Notifier(max_history=3)
        for i in range(5):
            notifier.success(f"n{i}")
        assert notifier.messages() == ["n2", "n3", "n4"]
