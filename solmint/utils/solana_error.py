"""
Custom error types for key pair and instruction operations.
"""


class SolmintError(Exception):
    """Base class for errors returned to API clients."""
    message = "Request failed"
    status_code = 400

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ClientError(SolmintError):
    """Base class for errors caused by caller input."""
    status_code = 400


class ServerError(SolmintError):
    """Base class for internal faults."""
    status_code = 500


class KeypairGenerationFailed(ServerError):
    """Raised when a key pair cannot be generated or encoded."""
    message = "Failed to generate keypair"


class InvalidMintAuthority(ClientError):
    """Raised when the mint authority is not a valid address."""
    message = "Invalid mint authority public key"


class InvalidMint(ClientError):
    """Raised when the mint is not a valid address."""
    message = "Invalid mint public key"


class InvalidRequestBody(ClientError):
    """Raised when the request body is missing fields or malformed."""
    message = "Invalid request body"


class InstructionConstructionFailed(ServerError):
    """Raised when the instruction layout rejects its parameters."""
    message = "Failed to create initialize mint instruction"


class ConfigurationError(Exception):
    """Raised when there's an issue with service configuration"""
    pass


# Public exports
__all__ = [
    'SolmintError',
    'ClientError',
    'ServerError',
    'KeypairGenerationFailed',
    'InvalidMintAuthority',
    'InvalidMint',
    'InvalidRequestBody',
    'InstructionConstructionFailed',
    'ConfigurationError',
]
