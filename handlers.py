"""Quest bot turn handlers.

Greets new conversation members and answers messages with a quest generated
by an LLM. Quest replies are validated against QUEST_SCHEMA and the model is
asked to repair its answer when validation fails.
"""

import os

from questbot.core.activity import Activity
from questbot.core.app import App
from questbot.core.runner import Runner
from questbot.llm.errors import AgentExecutionError, ResponseValidationError
from questbot.llm.repair import complete_prompt
from questbot.llm.subprocess_agent import SubprocessAgent
from questbot.validation import JSONResponseValidator

app = App()

QUEST_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "difficulty": {"enum": ["easy", "medium", "hard"]},
        "rewards": {"type": "array", "items": {"type": "string"}, "uniqueItems": True},
    },
    "required": ["title", "description", "difficulty"],
    "additionalProperties": False,
}

QUEST_PROMPT = """\
You are the quest master of a fantasy adventure. The player says:

{text}

Answer with a single JSON object with the keys "title", "description",
"difficulty" (one of "easy", "medium", "hard") and an optional "rewards" list.
"""

quest_validator = JSONResponseValidator(QUEST_SCHEMA)


@app.handler
def conversation_update(runner: Runner, activity: Activity) -> None:
    """Welcome members who join the conversation, except the bot itself."""
    bot_id = activity.recipient.id if activity.recipient else None
    for member in activity.members_added or []:
        if member.id != bot_id:
            runner.reply("Welcome, adventurer! Tell me what you are looking for and I will find you a quest.")


@app.handler
def message(runner: Runner, activity: Activity) -> None:
    """Generate a quest for the player's message."""
    agent = SubprocessAgent(model=os.environ.get("QUESTBOT_MODEL"))
    try:
        quest = complete_prompt(agent, QUEST_PROMPT.format(text=activity.text or ""), quest_validator)
    except AgentExecutionError as e:
        runner.logger.error(f"agent failed: {e}")
        runner.fail("The quest master is unavailable right now. Try again later.")
    except ResponseValidationError as e:
        runner.logger.info(f"quest never validated: {e.feedback}")
        runner.fail("I could not come up with a quest this time. Try again?")

    if quest is None:
        runner.fail("The quest master had nothing to say.")
    runner.logger.info(f"quest: {quest}")
    lines = [f"{quest['title']} ({quest['difficulty']})", quest["description"]]
    if quest.get("rewards"):
        lines.append("Rewards: " + ", ".join(quest["rewards"]))
    runner.reply("\n\n".join(lines))
