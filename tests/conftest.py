"""Shared fixtures for tag cloud tests."""

from configparser import ConfigParser

import pytest

from utils.config import Config

SAMPLE_TEXT = "the Cat sat on the mat. The cat ran."


def build_config(options=None):
    """Create a Config from a {section: {option: value}} dict."""
    cparser = ConfigParser(interpolation=None)
    cparser.read_dict(options or {})
    return Config(cparser)


@pytest.fixture
def make_config():
    return build_config


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("the Cat sat on\nthe mat. The cat ran.\n", encoding="utf-8")
    return path
