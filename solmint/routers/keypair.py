"""
Key pair router for the solmint API.
"""
from fastapi import APIRouter, Depends

from ..models import KeypairData, KeypairResponse, ErrorResponse
from ..utils.wallet import KeypairService
from ..dependencies.services import get_keypair_service

# Create router
router = APIRouter(
    tags=["Keypair"],
    responses={500: {"model": ErrorResponse, "description": "Key pair generation failed"}}
)


@router.post("/keypair", response_model=KeypairResponse)
def generate_keypair(service: KeypairService = Depends(get_keypair_service)):
    """
    Generate a new key pair.

    Returns the base58 public key and the base58 64-byte secret key.
    """
    keypair = service.generate()
    return KeypairResponse(data=KeypairData(pubkey=keypair.pubkey, secret=keypair.secret))
