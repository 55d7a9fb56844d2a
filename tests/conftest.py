"""Shared fixtures."""

import pytest

from svnmerge.config import ENV_OVERRIDES
from svnmerge.svn import LOG_DIVIDER

SAMPLE_LOG = f"""\
{LOG_DIVIDER}
r1024 | alice | 2024-01-15 10:32:11 +0100 (Mon, 15 Jan 2024) | 2 lines

Fix null pointer in login handler
{LOG_DIVIDER}
r1023 | bartholomew.longname | 2024-01-14 09:00:00 +0100 (Sun, 14 Jan 2024) | 1 line

Add export endpoint
{LOG_DIVIDER}
r1020 | carol | 2024-01-13 17:45:02 +0100 (Sat, 13 Jan 2024) | 3 lines

Refactor report builder
  split into sections

{LOG_DIVIDER}
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's REPO_BASE etc. out of tests.

    Setting before deleting makes monkeypatch remove anything a test loads
    from a .env file on teardown.
    """
    for name in ENV_OVERRIDES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def sample_log():
    return SAMPLE_LOG


@pytest.fixture
def scripted_input():
    """Return a factory for an input function that replays fixed answers.

    The returned function records every prompt in its ``prompts`` list and
    raises EOFError once the answers run out, like ``input()`` on a closed stdin.
    """
    def _make(*answers):
        remaining = list(answers)

        def _input(prompt):
            _input.prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        _input.prompts = []
        return _input
    return _make
