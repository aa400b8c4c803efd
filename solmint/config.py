"""
Configuration module for the solmint service.
Contains environment variables and other configuration settings.
"""
import os
from dataclasses import dataclass
from typing import Optional, Mapping

from dotenv import load_dotenv
from solders.pubkey import Pubkey
from solders.sysvar import RENT
from spl.token.constants import TOKEN_PROGRAM_ID as SPL_TOKEN_PROGRAM_ID

from . import __version__
from .utils.solana_error import ConfigurationError

# Server Configuration
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Logging Configuration
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs"


class Constants:
    """
    Constants used throughout the application.
    """
    # Solana Program IDs
    TOKEN_PROGRAM_ID = str(SPL_TOKEN_PROGRAM_ID)
    RENT_SYSVAR_ID = str(RENT)

    # Token settings
    MAX_DECIMALS = 255

    # API Settings
    API_VERSION = __version__
    API_TITLE = "solmint API"
    API_DESCRIPTION = "Solana key pair generation and SPL Token instruction construction"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_pubkey(name: str, value: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} is not a valid public key: {value}") from e


@dataclass(frozen=True)
class Settings:
    """
    Process-wide settings, resolved once at startup and injected into the app.
    """
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    token_program_id: Pubkey = SPL_TOKEN_PROGRAM_ID
    rent_sysvar: Pubkey = RENT
    collapse_errors: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: str = DEFAULT_LOG_DIR

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ after loading .env

        Returns:
            Settings: Resolved settings

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        port_value = environ.get("SOLMINT_PORT", str(DEFAULT_PORT))
        try:
            port = int(port_value)
        except ValueError as e:
            raise ConfigurationError(f"SOLMINT_PORT must be an integer: {port_value}") from e
        if not 0 < port < 65536:
            raise ConfigurationError(f"SOLMINT_PORT out of range: {port}")

        log_level = environ.get("SOLMINT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Unknown SOLMINT_LOG_LEVEL: {log_level}")

        return cls(
            host=environ.get("SOLMINT_HOST", DEFAULT_HOST),
            port=port,
            token_program_id=_parse_pubkey(
                "SOLMINT_TOKEN_PROGRAM_ID",
                environ.get("SOLMINT_TOKEN_PROGRAM_ID", Constants.TOKEN_PROGRAM_ID),
            ),
            rent_sysvar=_parse_pubkey(
                "SOLMINT_RENT_SYSVAR",
                environ.get("SOLMINT_RENT_SYSVAR", Constants.RENT_SYSVAR_ID),
            ),
            collapse_errors=_parse_bool(environ.get("SOLMINT_COLLAPSE_ERRORS", "false")),
            log_level=log_level,
            log_dir=environ.get("SOLMINT_LOG_DIR", DEFAULT_LOG_DIR),
        )
