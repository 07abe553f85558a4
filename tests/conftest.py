import importlib
import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("intstream.logic")

@pytest.fixture(scope="session")
def streams():
    return importlib.import_module("intstream.streams")
