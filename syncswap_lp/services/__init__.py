from .wallet import Wallet
from .pool_service import PoolService
from .liquidity_service import LiquidityService
from .web3_service import Web3Manager, web3_manager

__all__ = [
    "Wallet",
    "PoolService",
    "LiquidityService",
    "Web3Manager",
    "web3_manager"
]
