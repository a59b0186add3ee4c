"""Example Starlette application wired up with localized response bodies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from starlette_resp.context import StarletteContext
from starlette_resp.emitter import install, with_context
from starlette_resp.response import bad_request, field_required, new, not_found, unauthorized

if TYPE_CHECKING:
    from collections.abc import Iterable

    from starlette.requests import Request
    from starlette.types import ASGIApp

    from starlette_resp.localization import Localizer

logger = logging.getLogger(__name__)


class QueryLocaleMiddleware(BaseHTTPMiddleware):
    """Set ``request.state.locale`` from the ``lang`` query parameter.

    Values outside *languages* are ignored and the localizer default applies.
    """

    def __init__(self, app: ASGIApp, languages: Iterable[str]) -> None:
        super().__init__(app)
        self.languages = frozenset(languages)

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        lang = request.query_params.get("lang")
        if lang in self.languages:
            request.state.locale = lang
        return await call_next(request)


async def _bad_request(request: Request) -> Any:
    return with_context(StarletteContext(request)).response(bad_request())


async def _not_found(request: Request) -> Any:
    return with_context(StarletteContext(request)).response(not_found())


async def _unauthorized(request: Request) -> Any:
    return with_context(StarletteContext(request)).response(unauthorized())


async def _field_required(request: Request) -> Any:
    return with_context(StarletteContext(request)).response(field_required("email"))


async def _username_length(request: Request) -> Any:
    body = new("VAL002", "validation.username.length").with_param("min", 3).with_param("max", 20)
    return with_context(StarletteContext(request)).response(body)


async def _field(request: Request) -> Any:
    body = new("VAL001", "validation.field.required").with_param("field", "อีเมล")
    return with_context(StarletteContext(request)).response(body)


async def _raised(_request: Request) -> Any:
    raise not_found().with_cause("raised from handler").as_error()


async def _healthz(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_app(localizer: Localizer, *, languages: Iterable[str] | None = None) -> Starlette:
    """Build the example application.

    Parameters
    ----------
    localizer:
        Lookup used for every response on this app.
    languages:
        Locales a client may pick with ``?lang=``.  Defaults to the
        localizer's default locale only.
    """
    accepted = list(languages) if languages is not None else [localizer.default_locale]
    app = Starlette(
        routes=[
            Route("/test-bad-request", _bad_request, methods=["GET"]),
            Route("/test-not-found", _not_found, methods=["GET"]),
            Route("/test-unauthorized", _unauthorized, methods=["GET"]),
            Route("/test-field-required", _field_required, methods=["GET"]),
            Route("/test-username-length", _username_length, methods=["GET"]),
            Route("/test-field", _field, methods=["GET"]),
            Route("/test-raised", _raised, methods=["GET"]),
            Route("/healthz", _healthz, methods=["GET"]),
        ],
        middleware=[Middleware(QueryLocaleMiddleware, languages=accepted)],
    )
    install(app, localizer)
    logger.info("Example app ready (languages=%s)", ", ".join(accepted))
    return app
