"""ASGI entrypoint for the nutrition resolver API.

Serve ``nutrition_resolver.api.asgi:app`` with any ASGI server; settings
come from the environment and ``.env`` files.
"""

from nutrition_resolver.api.app import create_app
from nutrition_resolver.config import Settings
from nutrition_resolver.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
