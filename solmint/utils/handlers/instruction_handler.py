"""
Handler for building SPL Token program instructions.
"""

import logging
from typing import Any, Dict, List

from construct import ConstructError
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ..common import Utils
from ..metrics import INSTRUCTIONS_BUILT
from ..solana_error import (
    InstructionConstructionFailed,
    InvalidMint,
    InvalidMintAuthority,
)
from ..token_layouts import encode_initialize_mint

logger = logging.getLogger(__name__)


class InstructionHandler:
    """Builds token program instructions for a fixed program and rent sysvar"""

    def __init__(self, token_program_id: Pubkey, rent_sysvar: Pubkey):
        """
        Initialize the instruction handler

        Args:
            token_program_id: Token program that receives the instructions
            rent_sysvar: Address of the rent sysvar account
        """
        self.token_program_id = token_program_id
        self.rent_sysvar = rent_sysvar

    def build_initialize_mint(self, mint_authority: str, mint: str, decimals: int) -> Instruction:
        """
        Build an InitializeMint instruction without a freeze authority.

        The mint authority travels in the instruction data; only the mint
        and the rent sysvar are listed as accounts.

        Args:
            mint_authority: Base58 address allowed to mint new tokens
            mint: Base58 address of the mint account to initialize
            decimals: Fractional digits of the token, 0 to 255

        Returns:
            Instruction: Program id, ordered account metas and instruction data

        Raises:
            InvalidMintAuthority: If mint_authority is not a 32-byte base58 address
            InvalidMint: If mint is not a 32-byte base58 address
            InstructionConstructionFailed: If the layout rejects the parameters
        """
        try:
            mint_authority_pubkey = Utils.parse_pubkey(mint_authority)
        except ValueError as e:
            raise InvalidMintAuthority() from e

        try:
            mint_pubkey = Utils.parse_pubkey(mint)
        except ValueError as e:
            raise InvalidMint() from e

        try:
            data = encode_initialize_mint(decimals, mint_authority_pubkey)
        except (ConstructError, TypeError, ValueError) as e:
            logger.warning(f"InitializeMint layout rejected decimals={decimals!r}: {e}")
            raise InstructionConstructionFailed() from e

        accounts = [
            AccountMeta(pubkey=mint_pubkey, is_signer=False, is_writable=True),
            AccountMeta(pubkey=self.rent_sysvar, is_signer=False, is_writable=False),
        ]
        instruction = Instruction(self.token_program_id, data, accounts)

        INSTRUCTIONS_BUILT.labels(instruction="initialize_mint").inc()
        logger.info(f"Built InitializeMint for mint {mint_pubkey} (decimals={decimals})")
        return instruction

    @staticmethod
    def to_dict(instruction: Instruction) -> Dict[str, Any]:
        """
        Convert an instruction to its JSON response shape.

        Args:
            instruction: Instruction to convert

        Returns:
            Dict with program_id, accounts and base64 instruction_data
        """
        accounts: List[Dict[str, Any]] = [
            {
                "pubkey": Utils.pubkey_to_string(meta.pubkey),
                "is_signer": meta.is_signer,
                "is_writable": meta.is_writable,
            }
            for meta in instruction.accounts
        ]
        return {
            "program_id": Utils.pubkey_to_string(instruction.program_id),
            "accounts": accounts,
            "instruction_data": Utils.encode_base64(bytes(instruction.data)),
        }
