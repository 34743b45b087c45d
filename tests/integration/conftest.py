"""Fixtures for tests that run the full application across both domains."""

import pytest


@pytest.fixture(scope="session")
def app():
    from app import app

    return app


@pytest.fixture(autouse=True)
def reset_stores(app):
    """Wipe both domains' stores after every test."""
    yield

    from identity.domain import identity
    from ordering.domain import ordering

    for domain in (identity, ordering):
        with domain.domain_context():
            for _, provider in domain.providers.items():
                provider._data_reset()
