from .liquidity import *

__all__ = [
    "TokenAmount", "TokenInput", "PoolState", "TransactionStatus", "LiquidityResult"
]
