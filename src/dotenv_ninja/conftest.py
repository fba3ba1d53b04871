"""Configure `doctest` tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from unittest import mock

import pytest
import pytest_mock
import typer

from dotenv_ninja.backend import Backend
from dotenv_ninja.contrib.local import LocalBackend

# pylint: disable=redefined-outer-name


class ExampleBackend:
    """A sample backend class used in `doctest` tests."""

    source: str

    __repr__ = Backend.__repr__

    def __init__(self, source: str) -> None:
        """Initialize the backend with the given `source`."""
        self.source = source


@pytest.fixture(autouse=True)
def src_doctest_namespace(
    doctest_namespace: dict[str, Any],
    example_file: Path,
    settings_file: Path,
    caplog: pytest.LogCaptureFixture,
    mocker: pytest_mock.MockerFixture,
) -> dict[str, Any]:
    """Add various mocks and patches to the doctest namespace."""
    ctx = mock.MagicMock(spec=typer.Context)
    ctx.resilient_parsing = False
    ctx.obj = {}

    mocker.patch('logging.config.dictConfig')
    caplog.set_level(logging.NOTSET)

    doctest_namespace['example_file'] = example_file
    doctest_namespace['settings_file'] = settings_file
    doctest_namespace['pytest'] = pytest
    doctest_namespace['ExampleBackend'] = ExampleBackend
    doctest_namespace['LocalBackend'] = LocalBackend
    doctest_namespace['ctx'] = ctx
    doctest_namespace['caplog'] = caplog
    return doctest_namespace
