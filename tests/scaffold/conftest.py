"""Shared fixtures for scaffold tests."""

import os
import sys

import pytest

# Ensure tests/scaffold/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from goinit.scaffold.scaffold_opts import ScaffoldOpts  # noqa: E402


@pytest.fixture
def make_request(tmp_path):
    """Build a ScaffoldRequest for a project beneath tmp_path."""
    def _make(project_name="demo", rest_api=False):
        opts = ScaffoldOpts(project_name=project_name, rest_api=rest_api, base_dir=str(tmp_path))
        return opts.to_request()
    return _make
