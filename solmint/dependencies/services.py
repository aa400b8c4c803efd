"""
Service dependencies module.
Provides the settings and service instances used by the routers.
"""
from fastapi import Depends, Request

from ..config import Settings
from ..utils.handlers.instruction_handler import InstructionHandler
from ..utils.wallet import KeypairService


def get_settings(request: Request) -> Settings:
    """Settings injected into the app at startup."""
    return request.app.state.settings


def get_keypair_service() -> KeypairService:
    return KeypairService()


def get_instruction_handler(settings: Settings = Depends(get_settings)) -> InstructionHandler:
    """
    Instruction handler bound to the configured token program and rent sysvar.
    """
    return InstructionHandler(
        token_program_id=settings.token_program_id,
        rent_sysvar=settings.rent_sysvar,
    )
