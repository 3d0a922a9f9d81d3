"""FastAPI server for questbot.

This module defines the FastAPI application and the HTTP endpoint that
receives Bot Framework activities. Routes are defined here and delegate to
library modules for implementation.

Example:
    Run with uvicorn:
        uvicorn questbot.server:create_app --factory --port 3978
"""
import os

import dotenv
from fastapi import FastAPI, Response

from questbot.cli import load_app
from questbot.core.activity import Activity
from questbot.http.messages import handle_activity


def create_app(handlers_file: str | None = None) -> FastAPI:
    """Create and configure a FastAPI application for questbot.

    Loads environment variables from a .env file if present, then loads the
    questbot app from the handlers file and creates a FastAPI server with the
    /api/messages endpoint.

    Args:
        handlers_file: Path to Python file containing the questbot app.
            Defaults to QUESTBOT_HANDLERS_FILE env var or "handlers.py".

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    dotenv.load_dotenv()
    questbot_app = load_app(handlers_file or os.environ.get("QUESTBOT_HANDLERS_FILE", "handlers.py"))
    api = FastAPI(title="questbot")

    @api.post("/api/messages")
    async def messages(activity: Activity) -> Response:
        """Receive an activity and forward it to the bot for routing.

        Args:
            activity: Bot Framework activity parsed from the JSON body.

        Returns:
            Response: 200, with buffered replies for "expectReplies" delivery.
        """
        return await handle_activity(activity, questbot_app)

    @api.get("/healthz")
    async def healthz() -> dict:
        """Liveness probe."""
        return {"status": "ok"}

    return api
