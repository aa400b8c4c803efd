"""
Tests for the POST /token/create endpoint.
"""

import base64

import base58
import pytest
from fastapi.testclient import TestClient
from solders.pubkey import Pubkey

from solmint.config import Settings
from solmint.main import create_app
from tests.conftest import MINT_AUTHORITY, WRAPPED_SOL_MINT, TOKEN_PROGRAM_ID, RENT_SYSVAR


def test_create_token_success(client, token_request):
    response = client.post("/token/create", json=token_request)
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    assert body["data"]["program_id"] == TOKEN_PROGRAM_ID
    assert set(body["data"].keys()) == {"program_id", "accounts", "instruction_data"}


def test_instruction_data_layout(client, token_request):
    response = client.post("/token/create", json=token_request)
    data = base64.b64decode(response.json()["data"]["instruction_data"])

    expected = bytes([0, 9]) + base58.b58decode(MINT_AUTHORITY) + bytes([0])
    assert data == expected
    assert len(data) == 35


def test_instruction_data_is_deterministic(client, token_request):
    first = client.post("/token/create", json=token_request).json()
    second = client.post("/token/create", json=token_request).json()
    assert first == second


def test_account_order_and_flags(client, token_request):
    accounts = client.post("/token/create", json=token_request).json()["data"]["accounts"]

    assert accounts == [
        {"pubkey": WRAPPED_SOL_MINT, "is_signer": False, "is_writable": True},
        {"pubkey": RENT_SYSVAR, "is_signer": False, "is_writable": False},
    ]


def test_mint_authority_embedded_in_data(client, token_request):
    authority = str(Pubkey.from_bytes(bytes(range(32))))
    token_request["mintAuthority"] = authority

    body = client.post("/token/create", json=token_request).json()
    data = base64.b64decode(body["data"]["instruction_data"])

    assert data[2:34] == bytes(range(32))
    assert authority not in [account["pubkey"] for account in body["data"]["accounts"]]


@pytest.mark.parametrize("decimals", [0, 9, 10, 255])
def test_decimals_not_capped(client, token_request, decimals):
    token_request["decimals"] = decimals

    response = client.post("/token/create", json=token_request)
    assert response.status_code == 200
    assert base64.b64decode(response.json()["data"]["instruction_data"])[1] == decimals


@pytest.mark.parametrize("decimals", [-1, 256, "9", 9.5, True, None])
def test_decimals_out_of_u8_range(client, token_request, decimals):
    token_request["decimals"] = decimals

    response = client.post("/token/create", json=token_request)
    assert response.status_code == 400

    body = response.json()
    assert body["success"] is False
    assert body["error"].startswith("Invalid request body")
    assert "decimals" in body["error"]


def test_invalid_mint_authority_wins(client, token_request):
    token_request["mintAuthority"] = "not-a-key"

    response = client.post("/token/create", json=token_request)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid mint authority public key"}


def test_invalid_mint_authority_reported_before_invalid_mint(client, token_request):
    token_request["mintAuthority"] = "0OIl"
    token_request["mint"] = "0OIl"

    response = client.post("/token/create", json=token_request)
    assert response.json()["error"] == "Invalid mint authority public key"


@pytest.mark.parametrize("mint", [
    "0OIl0OIl0OIl",                      # characters outside the base58 alphabet
    "1111",                              # decodes to 4 bytes
    base58.b58encode(bytes(33)).decode(),  # decodes to 33 bytes
    "",
])
def test_invalid_mint(client, token_request, mint):
    token_request["mint"] = mint

    response = client.post("/token/create", json=token_request)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid mint public key"}


def test_missing_field(client, token_request):
    del token_request["mint"]

    response = client.post("/token/create", json=token_request)
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "mint" in body["error"]


def test_snake_case_authority_field_rejected(client, token_request):
    token_request["mint_authority"] = token_request.pop("mintAuthority")

    response = client.post("/token/create", json=token_request)
    assert response.status_code == 400
    assert "mintAuthority" in response.json()["error"]


def test_malformed_json(client):
    response = client.post(
        "/token/create",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_error_responses_carry_no_key_material(client, token_request):
    token_request["mint"] = "bad"

    body = client.post("/token/create", json=token_request).json()
    assert set(body.keys()) == {"success", "error"}
    assert MINT_AUTHORITY not in body["error"]


def test_configured_program_and_rent_sysvar(tmp_path, token_request):
    program_id = Pubkey.from_bytes(bytes([7] * 32))
    rent_sysvar = Pubkey.from_bytes(bytes([8] * 32))
    app = create_app(Settings(
        log_dir=str(tmp_path),
        token_program_id=program_id,
        rent_sysvar=rent_sysvar,
    ))

    with TestClient(app) as client:
        body = client.post("/token/create", json=token_request).json()

    assert body["data"]["program_id"] == str(program_id)
    assert body["data"]["accounts"][1]["pubkey"] == str(rent_sysvar)


def test_collapsed_errors_stay_bad_request(tmp_path, token_request):
    app = create_app(Settings(log_dir=str(tmp_path), collapse_errors=True))
    token_request["mint"] = "bad"

    with TestClient(app) as client:
        response = client.post("/token/create", json=token_request)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid mint public key"


def test_undecodable_body(client):
    response = client.post(
        "/token/create",
        content=b'{"mintAuthority":"1","mint":"\xff","decimals":9}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "There was an error parsing the body"}
