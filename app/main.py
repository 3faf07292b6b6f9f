from prometheus_fastapi_instrumentator import Instrumentator

from app.core.config import settings
from app.core.logging import configure_logging
from . import create_app

configure_logging()
app = create_app(settings)

if settings.METRICS_ENABLED:
    Instrumentator().instrument(app).expose(app, include_in_schema=False)
