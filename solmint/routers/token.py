"""
Token router - builds SPL Token program instructions
"""
from fastapi import APIRouter, Depends

from ..models import (
    AccountInfo,
    CreateTokenRequest,
    CreateTokenResponse,
    ErrorResponse,
    TokenInstructionData,
)
from ..utils.handlers.instruction_handler import InstructionHandler
from ..dependencies.services import get_instruction_handler

# Create router
router = APIRouter(
    prefix="/token",
    tags=["Token"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid address or request body"},
        500: {"model": ErrorResponse, "description": "Instruction construction failed"},
    }
)


@router.post("/create", response_model=CreateTokenResponse)
def create_token(
    request: CreateTokenRequest,
    handler: InstructionHandler = Depends(get_instruction_handler)
):
    """
    Build an InitializeMint instruction for the token program.

    Args:
        request: Mint authority, mint and decimals

    Returns:
        CreateTokenResponse: program_id, ordered accounts and base64 instruction data
    """
    instruction = handler.build_initialize_mint(
        mint_authority=request.mint_authority,
        mint=request.mint,
        decimals=request.decimals,
    )
    payload = handler.to_dict(instruction)

    return CreateTokenResponse(
        data=TokenInstructionData(
            program_id=payload["program_id"],
            accounts=[AccountInfo(**account) for account in payload["accounts"]],
            instruction_data=payload["instruction_data"],
        )
    )
