"""
Request and response models for the solmint API.
"""
from typing import List

from pydantic import BaseModel, Field

from ..config import Constants


# Requests
class CreateTokenRequest(BaseModel):
    """Body of POST /token/create"""
    mint_authority: str = Field(..., alias="mintAuthority", description="Base58 mint authority address")
    mint: str = Field(..., description="Base58 address of the mint account")
    decimals: int = Field(..., ge=0, le=Constants.MAX_DECIMALS, strict=True, description="Fractional digits of the token")


# Responses
class KeypairData(BaseModel):
    pubkey: str
    secret: str


class KeypairResponse(BaseModel):
    success: bool = True
    data: KeypairData


class AccountInfo(BaseModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class TokenInstructionData(BaseModel):
    program_id: str
    accounts: List[AccountInfo] = []
    instruction_data: str


class CreateTokenResponse(BaseModel):
    success: bool = True
    data: TokenInstructionData


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
