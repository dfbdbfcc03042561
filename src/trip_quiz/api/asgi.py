"""ASGI entrypoint for the trip quiz API."""

from trip_quiz.api.app import create_app
from trip_quiz.containers import build_container

app = create_app(build_container())
