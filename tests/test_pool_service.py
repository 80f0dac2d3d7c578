import pytest
from unittest.mock import AsyncMock, MagicMock
from syncswap_lp.errors import PoolNotFoundError
from syncswap_lp.services.pool_service import PoolService
from syncswap_lp.utils import ZERO_ADDRESS, normalize_address

WETH = normalize_address("0x20b28b1e4665fff290650586ad76e977eab90c5d")
USDC = normalize_address("0x0faf6df7054946141266420b43783387a78d82a9")
POOL = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class TestPoolService:
    """Test pool resolution through the factory"""

    @pytest.fixture
    def w3(self):
        return MagicMock()

    @pytest.fixture
    def factory(self, w3):
        factory = MagicMock()
        w3.eth.contract.return_value = factory
        return factory

    @pytest.mark.asyncio
    async def test_returns_pool_address(self, w3, factory):
        factory.functions.getPool.return_value.call = AsyncMock(return_value=POOL.lower())
        service = PoolService(w3, "0xf2FD2bc2fBC12842aAb6FbB8b1159a6a83E72006")

        pool = await service.get_pool_address(WETH, USDC)

        assert pool == POOL
        factory.functions.getPool.assert_called_once_with(WETH, USDC)

    @pytest.mark.asyncio
    async def test_zero_address_raises(self, w3, factory):
        factory.functions.getPool.return_value.call = AsyncMock(return_value=ZERO_ADDRESS)
        service = PoolService(w3, "0xf2FD2bc2fBC12842aAb6FbB8b1159a6a83E72006")

        with pytest.raises(PoolNotFoundError) as exc_info:
            await service.get_pool_address(WETH, USDC)

        assert "Pool does not exist" in str(exc_info.value)
        assert exc_info.value.token_a == WETH
        assert exc_info.value.token_b == USDC

    @pytest.mark.asyncio
    async def test_get_pool_state(self, w3, factory):
        pool = MagicMock()
        pool.functions.token0.return_value.call = AsyncMock(return_value=WETH.lower())
        pool.functions.token1.return_value.call = AsyncMock(return_value=USDC.lower())
        pool.functions.getReserves.return_value.call = AsyncMock(return_value=[10 ** 18, 2000 * 10 ** 6])
        service = PoolService(w3, "0xf2FD2bc2fBC12842aAb6FbB8b1159a6a83E72006")
        w3.eth.contract.return_value = pool

        state = await service.get_pool_state(POOL)

        assert state.address == POOL
        assert state.token0 == WETH
        assert state.token1 == USDC
        assert state.reserve0 == 10 ** 18
        assert state.reserve1 == 2000 * 10 ** 6
