"""ASGI app for one tracker session, e.g. ``uvicorn calorie_tracker.api.asgi:app``.

Settings are loaded at import, so a missing OPENAI_API_KEY stops startup.
"""

from calorie_tracker.api.app import create_app
from calorie_tracker.containers import build_container

app = create_app(build_container())
