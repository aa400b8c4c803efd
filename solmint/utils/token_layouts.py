"""
Binary layouts for SPL Token program instructions.
"""
from enum import IntEnum
from typing import Any, Dict, Optional

from borsh_construct import CStruct, Option, U8
from solders.pubkey import Pubkey

PUBKEY_LAYOUT = U8[32]


class TokenInstruction(IntEnum):
    """Instruction discriminants of the SPL Token program"""
    INITIALIZE_MINT = 0
    INITIALIZE_ACCOUNT = 1
    INITIALIZE_MULTISIG = 2
    TRANSFER = 3
    APPROVE = 4
    REVOKE = 5
    SET_AUTHORITY = 6
    MINT_TO = 7
    BURN = 8
    CLOSE_ACCOUNT = 9
    FREEZE_ACCOUNT = 10
    THAW_ACCOUNT = 11
    TRANSFER_CHECKED = 12
    APPROVE_CHECKED = 13
    MINT_TO_CHECKED = 14
    BURN_CHECKED = 15
    INITIALIZE_ACCOUNT2 = 16
    SYNC_NATIVE = 17
    INITIALIZE_ACCOUNT3 = 18
    INITIALIZE_MULTISIG2 = 19
    INITIALIZE_MINT2 = 20


# Borsh Option packs None as a single 0x00, the same as the token program's
# COption<Pubkey> packing for InitializeMint.
INITIALIZE_MINT_LAYOUT = CStruct(
    "decimals" / U8,
    "mint_authority" / PUBKEY_LAYOUT,
    "freeze_authority" / Option(PUBKEY_LAYOUT),
)


def encode_initialize_mint(
    decimals: int,
    mint_authority: Pubkey,
    freeze_authority: Optional[Pubkey] = None,
) -> bytes:
    """
    Encode InitializeMint instruction data.

    Args:
        decimals: Number of base 10 digits to the right of the decimal place
        mint_authority: Authority allowed to mint new tokens
        freeze_authority: Optional authority allowed to freeze token accounts

    Returns:
        bytes: Discriminant followed by the packed arguments
    """
    body = INITIALIZE_MINT_LAYOUT.build({
        "decimals": decimals,
        "mint_authority": list(bytes(mint_authority)),
        "freeze_authority": list(bytes(freeze_authority)) if freeze_authority is not None else None,
    })
    return bytes([TokenInstruction.INITIALIZE_MINT]) + body


def decode_initialize_mint(data: bytes) -> Dict[str, Any]:
    """Parse InitializeMint instruction data back into its fields."""
    if not data or data[0] != TokenInstruction.INITIALIZE_MINT:
        raise ValueError("Not an InitializeMint instruction")

    parsed = INITIALIZE_MINT_LAYOUT.parse(data[1:])
    freeze_authority = parsed.freeze_authority
    return {
        "instruction": TokenInstruction.INITIALIZE_MINT,
        "decimals": parsed.decimals,
        "mint_authority": Pubkey(bytes(parsed.mint_authority)),
        "freeze_authority": Pubkey(bytes(freeze_authority)) if freeze_authority is not None else None,
    }
