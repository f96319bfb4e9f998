from collections.abc import Iterator

import pytest

from gametime import clock


@pytest.fixture(autouse=True)
def no_installed_clock() -> Iterator[None]:
    clock.uninstall()
    yield
    clock.uninstall()
