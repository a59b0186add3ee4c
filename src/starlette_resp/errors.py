"""Exceptions raised by the response helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette_resp.response import ResponseBody


class LocalizationError(KeyError):
    """Raised when a message ID cannot be resolved to localized text.

    The emitter treats this as a soft failure and keeps the raw message.

    Attributes
    ----------
    message_id:
        The key that was looked up (e.g. ``"errors.bad_request"``).
    locale:
        Locale the lookup was made for.
    """

    def __init__(self, message_id: str, locale: str | None = None) -> None:
        super().__init__(message_id)
        self.message_id = message_id
        self.locale = locale

    def __str__(self) -> str:
        return f"No translation for '{self.message_id}' (locale={self.locale})"


class ResponseError(Exception):
    """Carries a :class:`~starlette_resp.response.ResponseBody` up to the exception handler.

    Raise from a route handler instead of returning the body; the handler
    registered by :func:`~starlette_resp.emitter.install` emits it.
    """

    def __init__(self, body: ResponseBody) -> None:
        super().__init__(body.message)
        self.body = body

    def __str__(self) -> str:
        return self.body.message
