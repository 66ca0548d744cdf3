import pytest


@pytest.fixture
def anyio_backend():
    # Textual runs on asyncio only.
    return "asyncio"
