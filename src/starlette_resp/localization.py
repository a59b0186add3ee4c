"""Localization lookup backed by python-i18n.

python-i18n keeps its translation cache at module level, so every
:class:`Localizer` shares one catalogue.  Bundles are ``<locale>.<format>``
files rooted at the locale key::

    {"en": {"errors": {"bad_request": "Bad request"}}}

Placeholders use python-i18n's ``%{name}`` syntax.  Template values are
substituted from a mapping, never passed as keyword arguments to
``i18n.t``, so parameter names such as ``locale`` or ``default`` are plain
placeholders.  Fallback to the default locale is done per localizer rather
than through python-i18n's global ``fallback`` setting.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import i18n
from i18n import translations
from i18n.resource_loader import search_translation
from i18n.translator import TranslationFormatter, pluralize

from starlette_resp.errors import LocalizationError

logger = logging.getLogger(__name__)


class Localizer:
    """Resolve message IDs to localized strings.

    Parameters
    ----------
    load_path:
        Directory holding the bundle files.  ``None`` means translations are
        registered in memory via :meth:`add_translation`.
    default_locale:
        Locale used when none is requested, and the fallback for misses.
    file_format:
        Bundle file extension understood by python-i18n (``"json"`` or
        ``"yml"``).
    """

    def __init__(
        self,
        load_path: str | os.PathLike[str] | None = None,
        *,
        default_locale: str = "en",
        file_format: str = "json",
    ) -> None:
        self.default_locale = default_locale
        self.load_path = os.fspath(load_path) if load_path is not None else None

        i18n.set("file_format", file_format)
        i18n.set("filename_format", "{locale}.{format}")
        if self.load_path is not None and self.load_path not in i18n.load_path:
            i18n.load_path.append(self.load_path)

        logger.info(
            "Localizer ready (load_path=%s, default_locale=%s, format=%s)",
            self.load_path,
            default_locale,
            file_format,
        )

    def localize(
        self,
        message_id: str,
        locale: str | None = None,
        template_data: dict[str, Any] | None = None,
    ) -> str:
        """Return the text for *message_id* in *locale*.

        Falls back to this localizer's default locale before giving up.  A
        ``count`` value selects the plural form when the translation has one.

        Raises
        ------
        LocalizationError
            If no bundle defines *message_id* or the bundles cannot be read.
        """
        target = locale or self.default_locale
        params = dict(template_data) if template_data else {}
        try:
            raw = self._lookup(message_id, target)
            if raw is None and target != self.default_locale:
                raw = self._lookup(message_id, self.default_locale)
        except (OSError, i18n.I18nFileLoadError) as exc:
            raise LocalizationError(message_id, target) from exc
        if raw is None:
            raise LocalizationError(message_id, target)

        if isinstance(raw, dict):
            if "count" not in params:
                raise LocalizationError(message_id, target)
            try:
                raw = pluralize(message_id, raw, params["count"])
            except KeyError as exc:
                raise LocalizationError(message_id, target) from exc
        return TranslationFormatter(str(raw)).safe_substitute(params)

    @staticmethod
    def _lookup(message_id: str, locale: str) -> Any | None:
        """Return the unformatted translation, loading bundles on first use."""
        if not translations.has(message_id, locale):
            search_translation(message_id, locale)
        if translations.has(message_id, locale):
            return translations.get(message_id, locale)
        return None

    def add_translation(self, message_id: str, text: str, locale: str | None = None) -> None:
        """Register a single translation in memory."""
        i18n.add_translation(message_id, text, locale=locale or self.default_locale)

    def reset(self) -> None:
        """Drop every cached translation and every load path but this localizer's own."""
        translations.container.clear()
        i18n.load_path.clear()
        if self.load_path is not None:
            i18n.load_path.append(self.load_path)
