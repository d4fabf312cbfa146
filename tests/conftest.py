"""Shared test fixtures for the configaccess test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest


def write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing a dedented config file under tmp_path."""

    def factory(name: str, content: str) -> Path:
        return write_text(tmp_path / name, content)

    return factory


@pytest.fixture
def a_ini(write_config: Callable[[str, str], Path]) -> Path:
    return write_config("a.ini", "[sec]\nkey=value1\n")


@pytest.fixture
def b_ini(write_config: Callable[[str, str], Path]) -> Path:
    return write_config("b.ini", "[sec]\nkey=value2\n")


@pytest.fixture
def app_cfg(write_config: Callable[[str, str], Path]) -> Path:
    """A multi-section INI file with a .cfg suffix."""
    return write_config(
        "app.cfg",
        """
        [server]
        host = localhost
        port = 8080
        debug = yes

        [database]
        url = postgres://db/app
        Timeout = 2.5
        empty =
        """,
    )
