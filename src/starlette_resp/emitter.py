"""Response emitter: localize a body and write it onto the response.

Usage::

    async def handler(request):
        body = new("VAL001", "validation.field.required").with_param("field", "email")
        return with_context(StarletteContext(request)).response(body)

A failed lookup is not an error: the client receives the raw message (the
key itself when the message was a key).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from opentelemetry import trace

from starlette_resp.context import StarletteContext
from starlette_resp.errors import LocalizationError, ResponseError

if TYPE_CHECKING:
    from starlette.applications import Starlette
    from starlette.requests import Request

    from starlette_resp.context import RequestContext
    from starlette_resp.localization import Localizer
    from starlette_resp.response import ResponseBody

logger = logging.getLogger(__name__)

_tracer = trace.get_tracer("starlette_resp.emitter")


def respond(ctx: RequestContext | None, body: ResponseBody) -> Any:
    """Localize *body*, set the status and write it as JSON on *ctx*.

    Without a context (``ctx is None``) nothing is looked up or written and
    *body* is returned unchanged.  Otherwise ``body.message`` is replaced in
    place by its translation when one exists, and the result of
    ``ctx.write_json`` is returned.
    """
    if ctx is None:
        return body

    with _tracer.start_as_current_span("resp.respond") as span:
        span.set_attribute("resp.code", body.code)
        span.set_attribute("resp.has_params", bool(body.locale_params))

        try:
            if body.locale_params:
                localized = ctx.localize(body.message, body.locale_params)
            else:
                localized = ctx.localize(body.message)
        except LocalizationError as exc:
            # The raw message is sent as-is.
            logger.debug("Localization miss for %s: %s", body.code, exc)
            span.set_attribute("resp.localized", False)
        else:
            body.message = localized
            span.set_attribute("resp.localized", True)

        ctx.set_status(body.status_code)
        span.set_attribute("http.status_code", body.status_code)
        return ctx.write_json(body.to_wire())


class Responder:
    """Binds a request context so bodies can be emitted with one call.

    Parameters
    ----------
    ctx:
        The active request context, or ``None`` outside a request.
    """

    def __init__(self, ctx: RequestContext | None) -> None:
        self.ctx = ctx

    def response(self, body: ResponseBody) -> Any:
        return respond(self.ctx, body)


def with_context(ctx: RequestContext | None) -> Responder:
    return Responder(ctx)


def install(app: Starlette, localizer: Localizer) -> None:
    """Make *app* emit raised :class:`ResponseError` bodies.

    Stores *localizer* on ``app.state.localizer`` so that
    :class:`StarletteContext` can find it without being handed one.
    """
    app.state.localizer = localizer

    async def _handle_response_error(request: Request, exc: Exception) -> Any:
        assert isinstance(exc, ResponseError)
        return respond(StarletteContext(request, localizer), exc.body)

    app.add_exception_handler(ResponseError, _handle_response_error)
