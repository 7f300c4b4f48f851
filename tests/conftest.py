import pytest

from tic_tac_toe_local.store import STORE


@pytest.fixture(autouse=True)
def fresh_store():
    # The API shares one module-level game; start every test from an empty board.
    STORE.reset()
    yield
    STORE.reset()
