"""
Common encoding helpers for the solmint service.
"""

import base58
import base64
from solders.pubkey import Pubkey


class Utils:
    """
    Utility class with static methods for common operations.
    """

    @staticmethod
    def encode_bs58(data: bytes) -> str:
        """
        Encode bytes as base58 string.

        Args:
            data: Bytes to encode

        Returns:
            Base58 encoded string
        """
        return base58.b58encode(data).decode('utf-8')

    @staticmethod
    def encode_base64(data: bytes) -> str:
        """
        Encode bytes as standard, padded base64 string.

        Args:
            data: Bytes to encode

        Returns:
            Base64 encoded string
        """
        return base64.b64encode(data).decode('utf-8')

    @staticmethod
    def parse_pubkey(address: str) -> Pubkey:
        """
        Parse a base58 address into a 32-byte public key.

        Raises:
            ValueError: If the address is not base58 or not 32 bytes long
        """
        if not isinstance(address, str):
            raise ValueError("Address must be a string")
        return Pubkey.from_string(address)

    @staticmethod
    def pubkey_to_string(pubkey: Pubkey) -> str:
        return str(pubkey)
