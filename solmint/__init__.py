"""
solmint - Solana key pair generation and SPL Token instruction construction.
"""

__version__ = "0.1.0"
