import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import LOG_LEVEL
from app.exceptions import GatewayError
from app.middleware import (
    add_cors_headers, gateway_exception_handler, http_exception_handler, validation_exception_handler
)
from app.routes import ping
from app.routes.accessibility import settings
from app.routes.chat import chat_recipe
from app.routes.dish import healthy_dish

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(
    title="Rasoi API",
    description="Healthier Indian home cooking, powered by AI.",
    version="0.1.0",
)

app.middleware("http")(add_cors_headers)

app.add_exception_handler(GatewayError, gateway_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Public routes
app.include_router(ping.router)

# Generation and settings routes verify the bearer token per endpoint, so CORS preflight stays public
app.include_router(healthy_dish.router)
app.include_router(chat_recipe.router)
app.include_router(settings.router)
