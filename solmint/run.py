"""
Start the solmint server.
"""

import sys

import uvicorn

from .config import Settings
from .main import create_app
from .utils.solana_error import ConfigurationError


def main() -> int:
    """Resolve settings, build the app and serve it"""
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    app = create_app(settings)
    print(f"Running on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == '__main__':
    sys.exit(main())
