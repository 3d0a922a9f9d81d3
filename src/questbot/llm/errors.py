"""LLM agent error types.

This module defines custom exceptions for LLM agent operations: failures to
run a prompt at all, and replies that never passed validation.
"""


class AgentExecutionError(Exception):
    """Raised when an agent fails to execute a prompt.

    This exception is raised when the agent's command cannot be found,
    returns a non-zero exit code, or encounters other execution failures.

    Example:
        >>> raise AgentExecutionError("llm binary not found")
        Traceback (most recent call last):
        ...
        AgentExecutionError: llm binary not found
    """


class ResponseValidationError(Exception):
    """Raised when a model never produced a valid response within the attempt budget.

    Attributes:
        feedback: The feedback from the last failed validation.
    """

    def __init__(self, feedback: str) -> None:
        super().__init__(feedback)
        self.feedback = feedback
