"""Shared fixtures for qwpage tests."""

from pathlib import Path

import pytest

from qwpage import PageComposer

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture
def composer() -> PageComposer:
    return PageComposer()
