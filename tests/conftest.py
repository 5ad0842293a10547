import logging

import pytest
import yaml
from possible_cpus import logging_setup


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Remove the console handler installed by a CLI invocation, its stream is closed afterwards."""
    yield
    if logging_setup._console_handler is not None:
        logging.getLogger().removeHandler(logging_setup._console_handler)
        logging_setup._console_handler = None


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("POSSIBLE_CPUS_POSSIBLE_CPUS_FILE", raising=False)
    monkeypatch.delenv("POSSIBLE_CPUS_NPROC_COMMAND", raising=False)


@pytest.fixture
def possible_file(tmp_path):
    path = tmp_path / "possible"
    path.write_text("0-7\n")
    return path


@pytest.fixture
def missing_file(tmp_path):
    return tmp_path / "does-not-exist"


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""
    counter = 0

    def _write_config(content: dict):
        nonlocal counter
        counter += 1
        path = tmp_path / f"config_{counter}.yaml"
        with open(path, "w") as fd:
            yaml.dump(content, fd)
        return path

    return _write_config
