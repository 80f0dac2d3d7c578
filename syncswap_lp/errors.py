from typing import Optional


class LiquidityError(Exception):
    """Base error for the liquidity flow"""


class ConfigurationError(LiquidityError):
    """A required setting is missing"""


class PoolNotFoundError(LiquidityError):
    """The factory has no pool for the token pair"""

    def __init__(self, token_a: str, token_b: str):
        self.token_a = token_a
        self.token_b = token_b
        super().__init__(f"Pool does not exist for {token_a}/{token_b}")


class TransactionFailedError(LiquidityError):
    """A transaction was mined but reverted"""

    def __init__(self, tx_hash: str, message: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(message or f"Transaction {tx_hash} reverted")
