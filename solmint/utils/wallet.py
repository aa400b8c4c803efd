"""
Key pair generation for Solana wallets.
"""

import logging
from dataclasses import dataclass

from solders.keypair import Keypair

from .common import Utils
from .metrics import KEYPAIRS_GENERATED
from .solana_error import KeypairGenerationFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedKeypair:
    """Base58 text form of a key pair"""
    pubkey: str
    secret: str

    def __repr__(self) -> str:
        return f"EncodedKeypair(pubkey={self.pubkey!r}, secret=<redacted>)"


class KeypairService:
    """
    Generates fresh ed25519 key pairs.

    Nothing is cached: each call draws a new key pair from the OS random
    source and only the encoded text leaves this class.
    """

    def generate(self) -> EncodedKeypair:
        """
        Generate a key pair and encode it as base58.

        Returns:
            EncodedKeypair: 32-byte public key and 64-byte secret (seed followed
            by public key), each base58 encoded

        Raises:
            KeypairGenerationFailed: If the key pair cannot be drawn or encoded
        """
        try:
            keypair = Keypair()
            pubkey = Utils.encode_bs58(bytes(keypair.pubkey()))
            secret = Utils.encode_bs58(bytes(keypair))
        except (ValueError, OSError, MemoryError) as e:
            logger.error(f"Key pair generation failed: {type(e).__name__}")
            raise KeypairGenerationFailed() from e

        KEYPAIRS_GENERATED.inc()
        logger.info(f"Generated keypair {pubkey}")
        return EncodedKeypair(pubkey=pubkey, secret=secret)
