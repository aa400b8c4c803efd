"""
Handlers for building Solana instructions
"""

from .instruction_handler import InstructionHandler

__all__ = ['InstructionHandler']
