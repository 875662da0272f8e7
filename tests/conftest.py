"""Pytest configuration and fixtures.

Test Markers:
    - Default: Unit tests run automatically
    - @pytest.mark.manual: Workflow tests that need the Temporal test server
    - @pytest.mark.slow: Tests that take more than a few seconds

Run commands:
    pytest                          # Run unit tests only (default)
    pytest -m manual                # Run workflow tests against the Temporal test server
    pytest -m ""                    # Run ALL tests (no filter)
"""

import pytest
from faker import Faker


@pytest.fixture(scope='session')
def faker() -> Faker:
    fake = Faker()
    fake.seed_instance(20240611)
    return fake
