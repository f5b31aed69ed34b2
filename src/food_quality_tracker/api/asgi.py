"""ASGI entrypoint for the food quality tracker API."""

from food_quality_tracker.api.app import create_app
from food_quality_tracker.containers import build_container

app = create_app(build_container())
