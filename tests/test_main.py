"""Tests for the __main__ entry point configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from starlette_resp.__main__ import _load_list_env, main

if TYPE_CHECKING:
    from pathlib import Path


class TestLoadListEnv:
    """Tests for _load_list_env helper."""

    def test_default_when_not_set(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            assert _load_list_env("MISSING_VAR", "th,en") == ["th", "en"]

    def test_strips_blanks(self) -> None:
        with patch.dict("os.environ", {"MY_VAR": " th , ,en "}):
            assert _load_list_env("MY_VAR", "en") == ["th", "en"]

    def test_exits_when_empty(self) -> None:
        with patch.dict("os.environ", {"MY_VAR": " , "}), pytest.raises(SystemExit):
            _load_list_env("MY_VAR", "en")


class TestMain:
    def test_exits_on_missing_locale_dir(self, tmp_path: Path) -> None:
        env = {"RESP_LOCALE_DIR": str(tmp_path / "nope")}
        with patch.dict("os.environ", env, clear=True), pytest.raises(SystemExit):
            main()

    def test_exits_when_default_not_accepted(self, tmp_path: Path) -> None:
        env = {"RESP_LOCALE_DIR": str(tmp_path), "RESP_DEFAULT_LOCALE": "de", "RESP_LANGUAGES": "th,en"}
        with patch.dict("os.environ", env, clear=True), pytest.raises(SystemExit):
            main()

    def test_exits_on_invalid_port(self, tmp_path: Path) -> None:
        env = {"RESP_LOCALE_DIR": str(tmp_path), "RESP_PORT": "abc"}
        with patch.dict("os.environ", env, clear=True), pytest.raises(SystemExit):
            main()

    def test_runs_server(self, tmp_path: Path) -> None:
        env = {"RESP_LOCALE_DIR": str(tmp_path), "RESP_HOST": "127.0.0.1", "RESP_PORT": "3100"}
        with (
            patch.dict("os.environ", env, clear=True),
            patch("starlette_resp.__main__.uvicorn.run") as run,
            patch("starlette_resp.__main__.Localizer") as localizer_cls,
        ):
            localizer_cls.return_value.default_locale = "en"
            main()

        localizer_cls.assert_called_once_with(str(tmp_path), default_locale="en")
        run.assert_called_once()
        assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 3100}
