# Keep Qt headless for the adapter tests and make sure no test leaks a base
# translator into the next one.

import os

import pytest

import l10n.application as l10n_app


@pytest.fixture(autouse=True, scope="session")
def _set_offscreen():  # ensure headless platform for Qt
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return True


@pytest.fixture(autouse=True)
def _isolate_base_translator():
    yield
    l10n_app.reset()
