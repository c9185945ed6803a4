import pytest

from rediscmds.control import CommandControl


@pytest.fixture(name="control")
def _control():
    return CommandControl(name="test")
