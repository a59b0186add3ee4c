"""Structured, localized JSON response bodies for Starlette."""

from starlette_resp.context import RequestContext, StarletteContext
from starlette_resp.emitter import Responder, install, respond, with_context
from starlette_resp.errors import LocalizationError, ResponseError
from starlette_resp.localization import Localizer
from starlette_resp.response import ResponseBody, bad_request, field_required, new, not_found, unauthorized

__all__ = [
    "LocalizationError",
    "Localizer",
    "RequestContext",
    "Responder",
    "ResponseBody",
    "ResponseError",
    "StarletteContext",
    "bad_request",
    "field_required",
    "install",
    "new",
    "not_found",
    "respond",
    "unauthorized",
    "with_context",
]
__version__ = "0.1.0"
