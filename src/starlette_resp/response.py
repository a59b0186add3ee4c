"""Response bodies: the structured JSON payload sent back to API clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from starlette_resp.errors import ResponseError

if TYPE_CHECKING:
    from starlette_resp.context import RequestContext

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404


class ResponseBody(BaseModel):
    """One response outcome, built up through chained ``with_*`` calls.

    Attributes
    ----------
    code:
        Machine-readable result code (e.g. ``"CLT001"``).
    data:
        Optional payload.  Serialized as ``null`` when unset.
    message:
        Literal display text or a localization key.  The emitter replaces a
        key with its translation.
    cause:
        Optional diagnostic detail.  Omitted from the wire body when unset.
    status_code:
        HTTP status to send.  Never serialized.
    locale_params:
        Values substituted into the localized message template.  Never
        serialized.
    """

    code: str
    data: Any = None
    message: str
    cause: str | None = None
    status_code: int = Field(default=HTTP_400, exclude=True)
    locale_params: dict[str, Any] = Field(default_factory=dict, exclude=True)

    def __str__(self) -> str:
        return self.message

    def with_data(self, data: Any) -> ResponseBody:
        self.data = data
        return self

    def with_status_code(self, status_code: int) -> ResponseBody:
        self.status_code = status_code
        return self

    def with_cause(self, cause: str) -> ResponseBody:
        self.cause = cause
        return self

    def with_message(self, message: str) -> ResponseBody:
        self.message = message
        return self

    def with_param(self, key: str, value: Any) -> ResponseBody:
        self.locale_params[key] = value
        return self

    def with_params(self, params: dict[str, Any]) -> ResponseBody:
        """Merge *params* into the locale parameters; later keys win."""
        self.locale_params.update(params)
        return self

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-safe body, leaving out ``cause`` when it was never set."""
        exclude = {"cause"} if self.cause is None else None
        return self.model_dump(mode="json", exclude=exclude)

    def response(self, ctx: RequestContext | None) -> Any:
        """Emit this body on *ctx*.  See :func:`starlette_resp.emitter.respond`."""
        from starlette_resp.emitter import respond

        return respond(ctx, self)

    def as_error(self) -> ResponseError:
        """Wrap this body in an exception that route handlers can raise."""
        return ResponseError(self)


def new(code: str, message: str) -> ResponseBody:
    """Create a body with no data, status 400 and no locale parameters.

    *message* may be literal text or a localization key.  Neither argument
    is validated.
    """
    return ResponseBody(code=code, message=message)


def bad_request() -> ResponseBody:
    return new("CLT001", "errors.bad_request")


def not_found() -> ResponseBody:
    return new("CLT002", "errors.not_found").with_status_code(HTTP_404)


def unauthorized() -> ResponseBody:
    return new("AUT001", "errors.unauthorized").with_status_code(HTTP_401)


def field_required(field: str) -> ResponseBody:
    """Validation failure for a missing field; the field name fills ``%{field}``."""
    return new("VAL001", "validation.field.required").with_param("field", field)
