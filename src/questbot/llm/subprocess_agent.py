"""Subprocess-backed agent.

Executes prompts through a command-line LLM client (for example `claude -p`
or `llm`) and wraps its stdout as an assistant message.
"""

import logging
import subprocess
from collections.abc import Sequence

from questbot.llm.errors import AgentExecutionError
from questbot.validation.domain import PromptResponse, StructuredMessage

logger = logging.getLogger("questbot.llm.subprocess_agent")

DEFAULT_COMMAND = ("claude", "-p")


class SubprocessAgent:
    """Agent that delegates prompts to an LLM command-line client.

    The prompt is appended as the final argument of the command. Empty output
    is reported as an assistant message with null content.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND, model: str | None = None) -> None:
        """Initialize the agent.

        Args:
            command: Executable and leading arguments. Defaults to `claude -p`.
            model: Optional model identifier passed as `--model` after the executable.
        """
        self.command = list(command)
        self.model = model
        logger.debug(f"SubprocessAgent initialized: command={self.command}, model={self.model}")

    def _build_command(self, prompt: str) -> list[str]:
        cmd = [*self.command, prompt]
        if self.model:
            cmd[1:1] = ["--model", self.model]
        return cmd

    def prompt(self, prompt: str) -> PromptResponse:
        """Run the command with the prompt and return its stdout as the reply.

        Args:
            prompt: The prompt string to send.

        Returns:
            A PromptResponse holding an assistant StructuredMessage.

        Raises:
            AgentExecutionError: On non-zero exit or missing binary.
        """
        cmd = self._build_command(prompt)
        executable = cmd[0]
        logger.info(f"LLM prompt submitted (length={len(prompt)} chars)")
        logger.debug(f"LLM prompt content: {prompt}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.error(f"{executable} binary not found")
            raise AgentExecutionError(f"{executable} binary not found")
        if result.returncode != 0:
            logger.error(f"{executable} exited with code {result.returncode}: {result.stderr}")
            raise AgentExecutionError(
                f"{executable} exited with code {result.returncode}: {result.stderr}"
            )
        content = result.stdout.strip() or None
        logger.info(f"LLM response received (length={len(result.stdout)} chars)")
        logger.debug(f"LLM response content: {result.stdout}")
        return PromptResponse(StructuredMessage("assistant", content))
