import os

import pytest

from easyfetch import MockBackend


@pytest.fixture()
def use_temp_dir(tmpdir):
    cur_dir = os.getcwd()
    os.chdir(tmpdir)
    yield
    os.chdir(cur_dir)


@pytest.fixture()
def backend() -> MockBackend:
    return MockBackend()
