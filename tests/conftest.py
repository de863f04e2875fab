import pytest

from grab.zero import set_zero_values


@pytest.fixture(autouse=True)
def reset_zero_values():
    """Each test starts from the zero values strategy configured in the environment"""
    set_zero_values(None)
    yield
    set_zero_values(None)
