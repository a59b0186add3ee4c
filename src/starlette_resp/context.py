"""Request contexts: the capability the emitter writes a response through.

The emitter only needs three things from the web framework: a localization
lookup, a way to set the status code, and a way to write a JSON body.
:class:`RequestContext` names that capability; :class:`StarletteContext`
provides it on top of a Starlette request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, runtime_checkable

from starlette.responses import JSONResponse
from typing_extensions import Protocol

if TYPE_CHECKING:
    from starlette.requests import Request

    from starlette_resp.localization import Localizer

HTTP_200 = 200


@runtime_checkable
class RequestContext(Protocol):
    """Structural typing interface for request contexts.

    Methods
    -------
    localize(message_id, template_data)
        Return the translated text for *message_id*.  Raise
        :class:`~starlette_resp.errors.LocalizationError` when it cannot be
        resolved.  ``template_data`` is ``None`` when the body has no locale
        parameters.
    set_status(status_code)
        Record the HTTP status for the response.
    write_json(body)
        Write *body* as the JSON response and return whatever the framework
        expects back from the handler.
    """

    def localize(self, message_id: str, template_data: dict[str, Any] | None = None) -> str: ...
    def set_status(self, status_code: int) -> None: ...
    def write_json(self, body: dict[str, Any]) -> Any: ...


class StarletteContext:
    """:class:`RequestContext` for a Starlette request.

    Parameters
    ----------
    request:
        The active request.
    localizer:
        Lookup to use.  Defaults to ``request.app.state.localizer`` as set by
        :func:`~starlette_resp.emitter.install`.

    The locale comes from ``request.state.locale`` when the application has
    set one, otherwise from the localizer's default.
    """

    def __init__(self, request: Request, localizer: Localizer | None = None) -> None:
        self.request = request
        self.localizer = localizer if localizer is not None else request.app.state.localizer
        self.status_code = HTTP_200

    @property
    def locale(self) -> str:
        return getattr(self.request.state, "locale", None) or self.localizer.default_locale

    def localize(self, message_id: str, template_data: dict[str, Any] | None = None) -> str:
        return self.localizer.localize(message_id, self.locale, template_data)

    def set_status(self, status_code: int) -> None:
        self.status_code = status_code

    def write_json(self, body: dict[str, Any]) -> JSONResponse:
        return JSONResponse(body, status_code=self.status_code)
