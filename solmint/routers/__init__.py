# This file makes the routers directory a Python package

from .keypair import router as keypair_router
from .token import router as token_router

routers = [
    keypair_router,
    token_router,
]
