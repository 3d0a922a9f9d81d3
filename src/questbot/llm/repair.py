"""Prompt repair loop.

Sends a prompt, validates the reply and, while the reply is invalid and the
attempt budget allows, re-prompts the model with its previous answer and the
validator's feedback.
"""

import logging
from typing import Any

from questbot.llm import Agent
from questbot.llm.errors import ResponseValidationError
from questbot.validation.domain import Invalid, ResponseValidator, message_text

logger = logging.getLogger("questbot.llm.repair")


def repair_prompt(prompt: str, previous_reply: str, feedback: str) -> str:
    """Build the follow-up prompt sent after an invalid reply.

    Args:
        prompt: The original prompt.
        previous_reply: Text of the reply that failed validation.
        feedback: Feedback produced by the validator.

    Returns:
        The original prompt followed by the rejected reply and the feedback.
    """
    return f"{prompt}\n\nYour previous response was:\n{previous_reply}\n\n{feedback}"


def complete_prompt(agent: Agent, prompt: str, validator: ResponseValidator, max_repair_attempts: int = 3) -> Any:
    """Prompt an agent until its reply passes validation.

    The first reply is followed by up to max_repair_attempts repair prompts.
    Each validation is told how many repair attempts remain.

    Args:
        agent: The agent to prompt.
        prompt: The prompt to send.
        validator: Validator applied to every reply.
        max_repair_attempts: Maximum number of repair prompts after the first reply.

    Returns:
        The value accepted by the validator.

    Raises:
        ResponseValidationError: If no reply validated within the budget.
        AgentExecutionError: If the agent fails to execute a prompt.
    """
    remaining = max_repair_attempts
    current = prompt
    while True:
        response = agent.prompt(current)
        result = validator.validate_response(response, remaining)
        if not isinstance(result, Invalid):
            logger.info(f"Response accepted after {max_repair_attempts - remaining} repair(s)")
            return result.value
        logger.info(f"Response rejected ({remaining} repair attempt(s) left)")
        logger.debug(f"Validation feedback: {result.feedback}")
        if remaining <= 0:
            raise ResponseValidationError(result.feedback)
        remaining -= 1
        previous_reply, _ = message_text(response.message)
        current = repair_prompt(prompt, previous_reply, result.feedback)
