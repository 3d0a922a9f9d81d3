"""Tests for the example quest bot handlers.

The LLM subprocess is replaced at the boundary so the quest prompt, repair
loop and replies can be exercised end to end.
"""

import json
import subprocess
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from questbot.channels.cli import CliChannel
from questbot.cli import load_app
from questbot.http import process_activity
from tests.conftest import TestChannel, make_activity

HANDLERS_FILE = Path(__file__).parent.parent / "handlers.py"

QUEST = {"title": "The Lost Lantern", "description": "Find it in the caves.", "difficulty": "easy", "rewards": ["gold"]}


def _completed(stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture()
def bot():
    app = load_app(str(HANDLERS_FILE))
    app.log_dir = tempfile.mkdtemp()
    return app


class TestQuestHandlers:
    def test_message_replies_with_quest(self, bot):
        channel = TestChannel(make_activity("I want treasure"))
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout=f"Here is your quest: {json.dumps(QUEST)}")
            assert process_activity(bot, channel) is True
        assert channel.texts == ["The Lost Lantern (easy)\n\nFind it in the caves.\n\nRewards: gold"]
        prompt = mock_run.call_args[0][0][-1]
        assert "I want treasure" in prompt

    def test_invalid_quest_is_repaired(self, bot):
        broken = {**QUEST, "difficulty": "legendary"}
        channel = TestChannel(make_activity("quest please"))
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.side_effect = [_completed(stdout=json.dumps(broken)), _completed(stdout=json.dumps(QUEST))]
            process_activity(bot, channel)
        assert mock_run.call_count == 2
        repair = mock_run.call_args_list[1][0][0][-1]
        assert 'change the "difficulty" property to be one of these values: easy,medium,hard' in repair
        assert channel.texts[0].startswith("The Lost Lantern")

    def test_quest_never_valid_fails_turn(self, bot):
        channel = TestChannel(make_activity("quest please"))
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="I'd rather not.")
            assert process_activity(bot, channel) is False
        assert channel.texts == ["I could not come up with a quest this time. Try again?"]

    def test_agent_failure_fails_turn(self, bot):
        channel = TestChannel(make_activity("quest please"))
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("claude")
            assert process_activity(bot, channel) is False
        assert channel.texts == ["The quest master is unavailable right now. Try again later."]

    def test_empty_reply_fails_turn(self, bot):
        channel = TestChannel(make_activity("quest please"))
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="")
            assert process_activity(bot, channel) is False
        assert channel.texts == ["The quest master had nothing to say."]

    def test_welcome_skips_the_bot(self, bot, capsys):
        channel = CliChannel("", activity_type="conversationUpdate")
        channel.activity.members_added = [channel.activity.recipient, channel.activity.from_]
        assert process_activity(bot, channel) is True
        assert capsys.readouterr().out.count("Welcome, adventurer!") == 1
