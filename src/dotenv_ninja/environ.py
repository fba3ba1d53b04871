"""Merge parsed entries into an environment variable store.

The store is any `typing.MutableMapping[str, str]`; `os.environ` is used when none is given. Keys that are
already defined are only replaced when `override=True`:

>>> store = {'X': 'old'}
>>> merge({'X': 'new', 'Y': 'added'}, store)
{'Y': 'added'}
>>> store
{'X': 'old', 'Y': 'added'}

>>> merge({'X': 'new'}, store, override=True)
{'X': 'new'}
>>> store['X']
'new'
"""

from __future__ import annotations

import logging
import os
import typing

__all__ = ['EnvironT', 'merge']

logger = logging.getLogger(__name__)

EnvironT = typing.MutableMapping[str, str]
"""Any mutable mapping of variable names to values can act as the environment store."""


def merge(
    parsed: typing.Mapping[str, str],
    environ: EnvironT | None = None,
    *,
    override: bool = False,
    debug: bool = False,
) -> dict[str, str]:
    """Write each parsed entry to `environ`, and return the entries that were written.

    The writes are applied one key at a time, in the order of `parsed`. A value the store rejects (such as one
    containing a null byte, for `os.environ`) is logged as a warning and skipped:

    >>> class Strict(dict):
    ...     def __setitem__(self, key, value):
    ...         if '\\x00' in value:
    ...             raise ValueError('embedded null byte')
    ...         super().__setitem__(key, value)
    >>> merge({'BAD': 'a\\x00b', 'GOOD': 'ok'}, Strict())
    {'GOOD': 'ok'}
    """
    if environ is None:
        environ = os.environ

    written: dict[str, str] = {}
    for key, value in parsed.items():
        if key in environ:
            if debug:
                logger.debug(
                    '"%s" is already defined in the environment and %s overwritten',
                    key,
                    'WAS' if override else 'was NOT',
                )
            if not override:
                continue

        try:
            environ[key] = value
        except ValueError as exc:
            logger.warning('"%s" could not be written to the environment: %s', key, exc)
            continue
        written[key] = value

    return written


logger.debug('successfully imported %s', __name__)
