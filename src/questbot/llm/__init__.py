"""LLM agent abstractions for questbot handlers.

This module defines the Agent protocol that all LLM implementations must follow.
Agents provide a uniform interface for executing prompts regardless of the
underlying LLM provider (a local CLI, a hosted API, etc.).
"""

from typing import Protocol

from questbot.validation.domain import PromptResponse


class Agent(Protocol):
    """Protocol for LLM agents that execute prompts.

    Implementations must provide a prompt() method that accepts a string and
    returns a PromptResponse wrapping the model's reply. The protocol allows
    for dependency injection and easy testing via mock agents.

    Example:
        >>> from questbot.validation import TextMessage
        >>> class MockAgent:
        ...     def prompt(self, prompt: str) -> PromptResponse:
        ...         return PromptResponse(TextMessage('{"ok": true}'))
        >>> MockAgent().prompt("test").message.text
        '{"ok": true}'
    """

    def prompt(self, prompt: str) -> PromptResponse:
        """Execute a prompt and return the response.

        Args:
            prompt: The prompt string to send to the LLM.

        Returns:
            The LLM's reply.

        Raises:
            AgentExecutionError: If the agent fails to execute the prompt.
        """
        ...
