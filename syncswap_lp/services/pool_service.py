import logging
from web3 import AsyncWeb3
from syncswap_lp.errors import PoolNotFoundError
from syncswap_lp.models import PoolState
from syncswap_lp.utils import (
    CLASSIC_POOL_ABI, CLASSIC_POOL_FACTORY_ABI, is_zero_address, normalize_address
)

logger = logging.getLogger(__name__)


class PoolService:
    """Resolves SyncSwap classic pools through the factory"""

    def __init__(self, w3: AsyncWeb3, factory_address: str):
        self._w3 = w3
        self._factory = w3.eth.contract(address=factory_address, abi=CLASSIC_POOL_FACTORY_ABI)

    async def get_pool_address(self, token_a: str, token_b: str) -> str:
        """
        Get the classic pool for a token pair.
        Raises PoolNotFoundError when the factory returns the zero address.
        """
        pool_address = await self._factory.functions.getPool(token_a, token_b).call()
        if is_zero_address(pool_address):
            raise PoolNotFoundError(token_a, token_b)

        pool_address = normalize_address(pool_address)
        logger.info(f"Resolved pool {pool_address} for {token_a}/{token_b}")
        return pool_address

    async def get_pool_state(self, pool_address: str) -> PoolState:
        """Read tokens and reserves of a classic pool"""
        pool = self._w3.eth.contract(address=pool_address, abi=CLASSIC_POOL_ABI)
        token0 = await pool.functions.token0().call()
        token1 = await pool.functions.token1().call()
        reserve0, reserve1 = await pool.functions.getReserves().call()

        return PoolState(
            address=pool_address,
            token0=normalize_address(token0),
            token1=normalize_address(token1),
            reserve0=reserve0,
            reserve1=reserve1,
        )
