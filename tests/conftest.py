"""
Pytest configuration file for the solmint tests.
"""

import pytest
from fastapi.testclient import TestClient

from solmint.config import Settings
from solmint.main import create_app

MINT_AUTHORITY = "11111111111111111111111111111111"
WRAPPED_SOL_MINT = "So11111111111111111111111111111111111111112"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
RENT_SYSVAR = "SysvarRent111111111111111111111111111111111"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Default settings writing logs to a temporary directory."""
    return Settings(log_dir=str(tmp_path / "logs"))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def token_request():
    """Request body for the fixed InitializeMint example."""
    return {
        "mintAuthority": MINT_AUTHORITY,
        "mint": WRAPPED_SOL_MINT,
        "decimals": 9,
    }
