"""ASGI entrypoint for the focus tracker API."""

from focus_tracker.api.app import create_app
from focus_tracker.containers import build_container

app = create_app(build_container())
