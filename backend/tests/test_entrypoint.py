"""Tests for the server launcher and logging setup."""
from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI

import accounts.__main__ as entrypoint
from accounts.core.config import Settings
from accounts.core.logging import setup_logging


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_parse_args_defaults_to_dotenv() -> None:
    assert entrypoint.parse_args([]).env == ".env"
    assert entrypoint.parse_args(["--env", "prod.env"]).env == "prod.env"


def test_setup_logging_uses_configured_level(restore_root_logger: logging.Logger) -> None:
    setup_logging(Settings(_env_file=None, log_level="warning"))

    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1


def test_main_serves_on_configured_address(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logger: logging.Logger
) -> None:
    monkeypatch.delenv("ACCOUNTS_HOST", raising=False)
    monkeypatch.delenv("ACCOUNTS_PORT", raising=False)
    env_file = tmp_path / "test.env"
    env_file.write_text(
        "ACCOUNTS_HOST=127.0.0.1\n"
        "ACCOUNTS_PORT=50099\n"
        "ACCOUNTS_APP_NAME=Accounts Test\n"
        f"ACCOUNTS_DATABASE_URL=sqlite+aiosqlite:///{tmp_path / 'accounts.db'}\n",
        encoding="utf-8",
    )
    calls: list[dict[str, Any]] = []

    def fake_run(app: FastAPI, **kwargs: Any) -> None:
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr(entrypoint, "run", fake_run)

    entrypoint.main(["--env", str(env_file)])

    assert len(calls) == 1
    assert calls[0]["host"] == "127.0.0.1"
    assert calls[0]["port"] == 50099
    assert calls[0]["app"].title == "Accounts Test"
