import pytest

from docstore import config


@pytest.fixture(scope="session", autouse=True)
def log_dir(tmp_path_factory):
    """Keep test runs from writing DocStore.log into the working directory."""
    original = config.LOG_DIR
    config.LOG_DIR = tmp_path_factory.mktemp("logs")
    yield config.LOG_DIR
    config.LOG_DIR = original
