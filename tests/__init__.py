"""Component-level / integration tests for `dotenv-ninja` are stored here.

Many unit tests are implemented for the `doctest`_ module. The fixtures available to these tests are
defined in `tests.fixtures`.

.. _doctest: https://docs.python.org/3/library/doctest.html
"""
