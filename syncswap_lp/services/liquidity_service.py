import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple, Union
from syncswap_lp.config import Settings, settings as default_settings
from syncswap_lp.errors import TransactionFailedError
from syncswap_lp.models import LiquidityResult, TokenAmount, TokenInput, TransactionStatus
from syncswap_lp.services.pool_service import PoolService
from syncswap_lp.services.wallet import Wallet
from syncswap_lp.utils import (
    ERC20_ABI, ROUTER_ABI, USDC_DECIMALS, WETH_DECIMALS, ZERO_ADDRESS,
    encode_receiver_data, format_units, parse_ether, parse_units
)

logger = logging.getLogger(__name__)

Amount = Union[int, float, str, Decimal]


class LiquidityService:
    """Approves the pair tokens and adds liquidity through the SyncSwap router"""

    def __init__(self, wallet: Wallet, pool_service: PoolService, settings: Settings = default_settings):
        self._wallet = wallet
        self._pool_service = pool_service
        self._settings = settings
        self._router = wallet.l2.eth.contract(address=settings.router_address, abi=ROUTER_ABI)

    def build_amounts(self, eth_amount: Amount, usdc_amount: Amount) -> Tuple[TokenAmount, TokenAmount]:
        """Convert human amounts to base units (18 decimals for wETH, 6 for USDC)"""
        weth = TokenAmount(
            address=self._settings.weth_address,
            symbol="WETH",
            decimals=WETH_DECIMALS,
            amount=Decimal(str(eth_amount)),
            base_units=parse_ether(eth_amount),
        )
        usdc = TokenAmount(
            address=self._settings.usdc_address,
            symbol="USDC",
            decimals=USDC_DECIMALS,
            amount=Decimal(str(usdc_amount)),
            base_units=parse_units(usdc_amount, USDC_DECIMALS),
        )
        return weth, usdc

    async def approve(self, token: TokenAmount) -> Dict[str, Any]:
        """Approve the router for the token amount and wait until it is mined"""
        logger.info(f"Approving {token.symbol}")
        contract = self._wallet.l2.eth.contract(address=token.address, abi=ERC20_ABI)
        function = contract.functions.approve(self._settings.router_address, token.base_units)

        tx_hash = await self._wallet.send_transaction(function)
        receipt = await self._wallet.wait_for_receipt(tx_hash)
        if receipt.get("status") != 1:
            raise TransactionFailedError(tx_hash, f"{token.symbol} approval {tx_hash} reverted")

        logger.info(f"{token.symbol} approved for {format_units(token.base_units, token.decimals)} ({tx_hash})")
        return receipt

    async def add_liquidity(self, eth_amount: Amount, usdc_amount: Amount) -> LiquidityResult:
        """
        Add liquidity to the wETH/USDC classic pool.
        Missing pool and reverted approvals raise; the final submission
        always returns a LiquidityResult.
        """
        weth, usdc = self.build_amounts(eth_amount, usdc_amount)

        pool_address = await self._pool_service.get_pool_address(weth.address, usdc.address)
        await self._log_pool_state(pool_address)

        await self.approve(weth)
        await self.approve(usdc)

        logger.info(f"Creating LP pair of {weth.amount} ETH and {usdc.amount} USDC")
        return await self.submit(pool_address, [weth, usdc])

    async def submit(self, pool_address: str, tokens: List[TokenAmount]) -> LiquidityResult:
        """Send addLiquidity to the router and wait for the receipt"""
        tx_hash: Optional[str] = None
        explorer_url: Optional[str] = None

        try:
            inputs = [TokenInput(token=token.address, amount=token.base_units) for token in tokens]
            function = self._router.functions.addLiquidity(
                pool_address,
                [token_input.model_dump() for token_input in inputs],
                encode_receiver_data(self._wallet.address),
                self._settings.min_liquidity,
                ZERO_ADDRESS,  # no callback
                b"",
            )

            tx_hash = await self._wallet.send_transaction(function, gas=self._settings.gas_limit)
            explorer_url = self._settings.get_tx_url(tx_hash)
            logger.info(f"tx hash {tx_hash}")
            logger.info(f"view on explorer: {explorer_url}")

            receipt = await self._wallet.wait_for_receipt(tx_hash)
        except Exception as e:
            logger.exception(f"Failed to add liquidity: {e}")
            return LiquidityResult(
                status=TransactionStatus.FAILED,
                pool_address=pool_address,
                tx_hash=tx_hash,
                explorer_url=explorer_url,
                error=str(e),
            )

        if receipt.get("status") != 1:
            logger.error(f"addLiquidity reverted: {receipt}")
            return LiquidityResult(
                status=TransactionStatus.REVERTED,
                pool_address=pool_address,
                tx_hash=tx_hash,
                explorer_url=explorer_url,
                receipt=receipt,
                error=f"Transaction {tx_hash} reverted",
            )

        logger.info(f"Liquidity added: {receipt}")
        return LiquidityResult(
            status=TransactionStatus.CONFIRMED,
            pool_address=pool_address,
            tx_hash=tx_hash,
            explorer_url=explorer_url,
            receipt=receipt,
        )

    async def _log_pool_state(self, pool_address: str):
        try:
            state = await self._pool_service.get_pool_state(pool_address)
            logger.info(
                f"Pool {state.address} reserves: {state.token0}={state.reserve0}, "
                f"{state.token1}={state.reserve1}"
            )
        except Exception as e:
            logger.warning(f"Could not read reserves of pool {pool_address}: {e}")
