"""ASGI entrypoint for the nutrient profiler API."""

from nutrient_profiler.api.app import create_app
from nutrient_profiler.containers import build_container

app = create_app(build_container())
