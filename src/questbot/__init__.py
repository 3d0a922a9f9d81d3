"""questbot: a Bot Framework bot with validated LLM responses.

questbot wires Bot Framework activities received over HTTP to registered
turn handlers, and provides JSON response validation with repair feedback
for handlers that prompt language models.
"""

from questbot.core.activity import Activity
from questbot.core.app import App
from questbot.core.domain import Channel, TurnFailedError
from questbot.core.runner import Runner
from questbot.channels.activity import ActivityChannel
from questbot.channels.cli import CliChannel
from questbot.llm.errors import AgentExecutionError, ResponseValidationError
from questbot.llm.repair import complete_prompt
from questbot.llm.subprocess_agent import SubprocessAgent
from questbot.validation import Invalid, JSONResponseValidator, Valid

__all__ = [
    "Activity",
    "ActivityChannel",
    "AgentExecutionError",
    "App",
    "Channel",
    "CliChannel",
    "Invalid",
    "JSONResponseValidator",
    "ResponseValidationError",
    "Runner",
    "SubprocessAgent",
    "TurnFailedError",
    "Valid",
    "complete_prompt",
]
