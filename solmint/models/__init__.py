"""
Request and response models for the solmint API.
"""

from .responses import (
    CreateTokenRequest,
    KeypairData,
    KeypairResponse,
    AccountInfo,
    TokenInstructionData,
    CreateTokenResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    'CreateTokenRequest',
    'KeypairData',
    'KeypairResponse',
    'AccountInfo',
    'TokenInstructionData',
    'CreateTokenResponse',
    'ErrorResponse',
    'HealthResponse',
]
