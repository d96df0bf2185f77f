"""
Tests for text command classification.
"""
import pytest

from claimgenie.orchestration.intake.commands import Command, classify_command, classify_confirmation


class TestGlobalCommands:
    """Restart and lookup commands."""

    @pytest.mark.parametrize("text", ["restart", "RESET", "  Restart.  ", "reset!"])
    def test_restart(self, text):
        assert classify_command(text) == Command.RESTART

    def test_restart_must_be_whole_message(self):
        assert classify_command("please restart the form") != Command.RESTART

    @pytest.mark.parametrize("text", ["retrieve claim", "Retrieve", "I want to retrieve my claim", "look up claim"])
    def test_lookup(self, text):
        assert classify_command(text) == Command.LOOKUP


class TestShortcutCommands:
    """Terminal-state shortcuts."""

    @pytest.mark.parametrize("text", ["my claims", "view my claims", "Show claims", "list my claims"])
    def test_view_claims(self, text):
        assert classify_command(text) == Command.VIEW_CLAIMS

    @pytest.mark.parametrize("text", ["new claim", "file a new claim", "File new claim"])
    def test_new_claim(self, text):
        assert classify_command(text) == Command.NEW_CLAIM

    def test_new_claim_is_not_a_no(self):
        """'new claim' starts with 'n' but must not read as a negative answer."""
        assert classify_command("new claim") != Command.CONFIRM_NO


class TestConfirmation:
    """Yes/no classification by leading letter."""

    @pytest.mark.parametrize("text", ["yes", "Y", "yeah sure", "Yep"])
    def test_affirmative(self, text):
        assert classify_command(text) == Command.CONFIRM_YES

    @pytest.mark.parametrize("text", ["no", "N", "Nope", "not now"])
    def test_negative(self, text):
        assert classify_command(text) == Command.CONFIRM_NO

    @pytest.mark.parametrize("text", ["", "   ", "POL2", "maybe", "CLM-1000"])
    def test_everything_else_continues(self, text):
        assert classify_command(text) == Command.CONTINUE

    @pytest.mark.parametrize("text,expected", [
        ("new claim", Command.CONFIRM_NO),
        ("no", Command.CONFIRM_NO),
        ("Yes please", Command.CONFIRM_YES),
        ("my claims", Command.CONTINUE),
        ("", Command.CONTINUE),
    ])
    def test_answer_to_prompt_uses_leading_letter_only(self, text, expected):
        assert classify_confirmation(text) == expected
