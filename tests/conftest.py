"""Shared test fixtures for starlette-resp tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from starlette_resp.errors import LocalizationError
from starlette_resp.localization import Localizer

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

BUNDLES: dict[str, dict[str, Any]] = {
    "en": {
        "errors": {"bad_request": "Bad request", "not_found": "Not found", "unauthorized": "Unauthorized"},
        "validation": {"field": {"required": "%{field} is required"}},
    },
    "th": {
        "errors": {"bad_request": "คำขอไม่ถูกต้อง", "not_found": "ไม่พบข้อมูล"},
        "validation": {"field": {"required": "จำเป็นต้องระบุ%{field}"}},
    },
}


class FakeContext:
    """In-memory RequestContext that records every call."""

    def __init__(self, translations: dict[str, str] | None = None) -> None:
        self.translations = translations or {}
        self.localize_calls: list[tuple[str, dict[str, Any] | None]] = []
        self.status_calls: list[int] = []
        self.written: list[dict[str, Any]] = []

    def localize(self, message_id: str, template_data: dict[str, Any] | None = None) -> str:
        self.localize_calls.append((message_id, template_data))
        if message_id not in self.translations:
            raise LocalizationError(message_id, "en")
        text = self.translations[message_id]
        for key, value in (template_data or {}).items():
            text = text.replace(f"%{{{key}}}", str(value))
        return text

    def set_status(self, status_code: int) -> None:
        self.status_calls.append(status_code)

    def write_json(self, body: dict[str, Any]) -> dict[str, Any]:
        self.written.append(body)
        return body


@pytest.fixture
def fake_ctx() -> FakeContext:
    """A context knowing two English messages."""
    return FakeContext(
        {
            "errors.bad_request": "Bad request",
            "validation.field.required": "%{field} is required",
        }
    )


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """A directory with en/th JSON bundles."""
    for locale, messages in BUNDLES.items():
        (tmp_path / f"{locale}.json").write_text(json.dumps({locale: messages}), encoding="utf-8")
    return tmp_path


@pytest.fixture
def localizer(locale_dir: Path) -> Generator[Localizer, None, None]:
    """A Localizer over the test bundles; global python-i18n state is reset afterwards."""
    loc = Localizer(locale_dir, default_locale="en")
    loc.reset()
    yield loc
    loc.reset()
