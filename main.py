import asyncio
import logging
import sys
from decimal import Decimal
from typing import Union
from syncswap_lp.config import settings
from syncswap_lp.errors import LiquidityError
from syncswap_lp.models import LiquidityResult
from syncswap_lp.services import LiquidityService, PoolService, web3_manager

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


async def add_liquidity(eth_amount: Union[float, Decimal], usdc_amount: Union[float, Decimal]) -> LiquidityResult:
    """Add wETH/USDC liquidity on the zkSync testnet"""
    try:
        await web3_manager.check_connections()

        wallet = web3_manager.create_wallet()
        pool_service = PoolService(web3_manager.l2, settings.pool_factory_address)
        service = LiquidityService(wallet, pool_service)
        return await service.add_liquidity(eth_amount, usdc_amount)
    finally:
        await web3_manager.close()


def main() -> int:
    try:
        result = asyncio.run(add_liquidity(settings.eth_amount, settings.usdc_amount))
    except LiquidityError as e:
        logger.error(f"Add liquidity aborted: {e}")
        return 1

    if not result.succeeded:
        logger.error(f"Add liquidity {result.status.value}: {result.error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
