from importlib import metadata

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from summation.api.v1 import health, summation
from summation.core import errors
from summation.core.config import get_settings
from summation.core.logging import setup_logging
from summation.core.middleware import RequestIdMiddleware

settings = get_settings()
setup_logging(settings.log_level)

try:
    app_version = metadata.version("summation")
except metadata.PackageNotFoundError:
    app_version = "0.1.0"

app = FastAPI(title=settings.api_title, version=app_version)

app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(summation.router)

app.add_exception_handler(errors.DecodeError, errors.decode_exception_handler)
app.add_exception_handler(StarletteHTTPException, errors.http_exception_handler)
app.add_exception_handler(Exception, errors.unhandled_exception_handler)
