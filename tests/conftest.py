"""Shared fixtures for the renderer test-suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from commonform_render.domain.ports.report_sink import ReportSinkPort


class CapturingSink(ReportSinkPort):
    """Report sink that records every message it receives."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.infos: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def info(self, message: str) -> None:
        self.infos.append(message)


@pytest.fixture()
def notice() -> CapturingSink:
    return CapturingSink()


@pytest.fixture()
def log() -> CapturingSink:
    return CapturingSink()


@pytest.fixture()
def settings_file(tmp_path: Path) -> Path:
    """Settings that keep the log channel off disk."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"reporting": {"persist_log": False}}), encoding="utf-8")
    return path


LEASE = """---
title: Lease
blanks:
  - Tenant Name
---

This lease is between ""Landlord"" and [Tenant Name].

# Rent

<Landlord> receives [Rent] monthly. See {Term}.

# Term

!!! The lease ends on [End Date].
"""


@pytest.fixture()
def lease_source(tmp_path: Path) -> Path:
    path = tmp_path / "forms" / "lease.md"
    path.parent.mkdir()
    path.write_text(LEASE, encoding="utf-8")
    return path


@pytest.fixture()
def lease_text() -> str:
    return LEASE
