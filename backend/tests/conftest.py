"""Pytest fixtures wiring an isolated JSON document store per test.

Every test gets its own ``database.json`` under ``tmp_path`` so data never
leaks between cases and tests may run in any order.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from chirpy.core.config import TestingConfig
from chirpy.factory import create_app
from chirpy.infra.jwt.pyjwt_token_signer import PyJWTTokenSigner
from chirpy.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from chirpy.repositories import DocumentStore
from chirpy.services._shared.ports import FixedEntropySource
from chirpy.services.accounts import AccountService
from chirpy.services.auth import AuthorizationService, AuthTokenConfig
from chirpy.services.posts import PostService

from tests.factories import FAST_HASH_METHOD
from tests.helpers.utils import TEST_SECRET


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    """Location of the backing file for the current test."""
    return tmp_path / "database.json"


@pytest.fixture()
def store(db_path: Path) -> DocumentStore:
    """Open an empty :class:`DocumentStore` on a temporary file.

    Returns
    -------
    DocumentStore
        Store bound to ``db_path``; the file exists and is empty.
    """
    return DocumentStore.open(db_path)


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    """Password hasher using a cheap method so suites stay fast."""
    return WerkzeugPasswordHasher(method=FAST_HASH_METHOD)


@pytest.fixture()
def signer() -> PyJWTTokenSigner:
    return PyJWTTokenSigner()


@pytest.fixture()
def token_cfg() -> AuthTokenConfig:
    return AuthTokenConfig(secret=TEST_SECRET)


@pytest.fixture()
def entropy() -> FixedEntropySource:
    """Deterministic randomness: every refresh token is ``"ab" * 32``."""
    return FixedEntropySource(b"\xab")


@pytest.fixture()
def auth_service(store, hasher, signer, token_cfg) -> AuthorizationService:
    """Build an AuthorizationService wired to the temporary store.

    Uses the system CSPRNG so consecutive logins yield distinct tokens.
    """
    return AuthorizationService(store=store, hasher=hasher, signer=signer, token_cfg=token_cfg)


@pytest.fixture()
def account_service(store, hasher) -> AccountService:
    return AccountService(store=store, hasher=hasher)


@pytest.fixture()
def post_service(store) -> PostService:
    return PostService(store=store)


@pytest.fixture()
def app(db_path: Path):
    """Create a Flask application bound to the temporary document.

    Parameters
    ----------
    db_path: pathlib.Path
        Backing file handed to the app through ``DATABASE_PATH``.

    Returns
    -------
    flask.Flask
        Application instance with a per-test testing configuration and
        logging noise reduced.
    """

    class TestConfig(TestingConfig):
        DATABASE_PATH = str(db_path)
        JWT_SECRET = TEST_SECRET
        RESET_DB_ON_START = False
        PROPAGATE_EXCEPTIONS = False
        LOG_LEVEL = "WARNING"

    app = create_app(TestConfig, instance_relative_config=False)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture()
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
