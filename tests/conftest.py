"""Shared test fixtures for textprep."""

import os
import tempfile

import pytest


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def stop_words_file(tmp_dir):
    """A YAML stop-word table with a German set and a short English override."""
    import yaml

    path = os.path.join(tmp_dir, "stopwords.yaml")
    with open(path, "w") as f:
        yaml.dump({"de": ["der", "die", "das", "und"], "en": ["the", "a"]}, f)
    return path


@pytest.fixture
def tmp_config_file(tmp_dir, stop_words_file):
    """Create a temporary YAML config file pointing at the stop-word table."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "log_dir": os.path.join(tmp_dir, "logs"),
        },
        "text": {
            "language": "de",
            "purify_replacer": "_",
            "stop_words_file": stop_words_file,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path
