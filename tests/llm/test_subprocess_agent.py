"""Tests for SubprocessAgent.

Unit tests covering subprocess delegation, model flag handling, null content
and error propagation.
"""

import subprocess
from unittest.mock import patch

import pytest

from questbot.llm.errors import AgentExecutionError
from questbot.llm.subprocess_agent import SubprocessAgent
from questbot.validation import StructuredMessage


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestSubprocessAgent:
    """Test suite for SubprocessAgent subprocess delegation and error handling."""

    def test_successful_prompt_returns_assistant_message(self):
        """Test that stdout is wrapped as an assistant message."""
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout='{"a": 1}\n')
            response = SubprocessAgent().prompt("hello")
        assert response.status == "success"
        assert response.message == StructuredMessage("assistant", '{"a": 1}')

    def test_empty_output_is_null_content(self):
        """Test that an empty reply is reported as null content."""
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="  \n")
            response = SubprocessAgent().prompt("hello")
        assert response.message == StructuredMessage("assistant", None)

    def test_default_command(self):
        """Test that the prompt is appended to the default command."""
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="ok")
            SubprocessAgent().prompt("")
            assert mock_run.call_args[0][0] == ["claude", "-p", ""]

    def test_custom_command(self):
        """Test that a custom command is used as the prefix."""
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="ok")
            SubprocessAgent(command=["llm", "--no-stream"]).prompt("hi")
            assert mock_run.call_args[0][0] == ["llm", "--no-stream", "hi"]

    def test_model_passed_to_subprocess(self):
        """Test that the model flag follows the executable when set."""
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="ok")
            SubprocessAgent(model="opus").prompt("hello")
            assert mock_run.call_args[0][0] == ["claude", "--model", "opus", "-p", "hello"]

    def test_no_model_omits_flag(self):
        """Test that the model flag is omitted when model is None."""
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="ok")
            SubprocessAgent().prompt("hello")
            assert "--model" not in mock_run.call_args[0][0]

    def test_failed_prompt_raises_agent_execution_error(self):
        """Test that a non-zero exit code raises AgentExecutionError."""
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.return_value = _completed(returncode=1, stderr="boom")
            with pytest.raises(AgentExecutionError, match="claude exited with code 1: boom"):
                SubprocessAgent().prompt("hello")

    def test_missing_binary_raises_agent_execution_error(self):
        """Test that FileNotFoundError from subprocess is wrapped in AgentExecutionError."""
        with patch("questbot.llm.subprocess_agent.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("llm")
            with pytest.raises(AgentExecutionError, match="llm binary not found"):
                SubprocessAgent(command=["llm"]).prompt("hello")
