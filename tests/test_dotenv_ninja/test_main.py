"""A simple test to check `dotenv_ninja.__main__`."""

from __future__ import annotations

import sys

from pytest_mock import MockerFixture

from dotenv_ninja import __main__, cli


def test_main(mocker: MockerFixture) -> None:
    """Ensure the `typer` app is called."""
    # Arrange
    mock_app = mocker.patch.object(cli, 'app')
    mocker.patch.object(sys, 'argv', ['dotenv-ninja', 'version'])

    # Act
    __main__.main()

    # Assert
    mock_app.assert_called_once_with(prog_name='dotenv-ninja')
    assert ['dotenv-ninja', 'version'] == sys.argv


def test_main_args(mocker: MockerFixture) -> None:
    """Verify arguments override `sys.argv`."""
    # Arrange
    mock_app = mocker.patch.object(cli, 'app')
    mocker.patch.object(sys, 'argv', ['dotenv-ninja', 'ignored'])

    # Act
    __main__.main('get', '--format', 'yaml')

    # Assert
    mock_app.assert_called_once_with(prog_name='dotenv-ninja')
    assert ['dotenv-ninja', 'get', '--format', 'yaml'] == sys.argv
