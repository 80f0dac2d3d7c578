import pytest
from unittest.mock import AsyncMock, MagicMock
from syncswap_lp.errors import ConfigurationError
from syncswap_lp.services.wallet import Wallet

# Well-known development key, never funded on a real network
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class TestWallet:
    """Test signing and broadcasting through the wallet"""

    @pytest.fixture
    def l2(self):
        l2 = MagicMock()
        l2.eth.get_transaction_count = AsyncMock(return_value=7)
        l2.eth.send_raw_transaction = AsyncMock(return_value=bytes.fromhex("ab" * 32))
        l2.eth.wait_for_transaction_receipt = AsyncMock(return_value={"status": 1, "gasUsed": 50000})
        return l2

    @pytest.fixture
    def function(self):
        function = MagicMock()
        function.build_transaction = AsyncMock(return_value={
            "to": ADDRESS,
            "value": 0,
            "gas": 100000,
            "gasPrice": 250000000,
            "nonce": 7,
            "chainId": 280,
            "data": "0x",
        })
        return function

    def test_missing_private_key(self, l2):
        with pytest.raises(ConfigurationError):
            Wallet(None, l2)

    def test_address(self, l2):
        wallet = Wallet(PRIVATE_KEY, l2)
        assert wallet.address == ADDRESS

    @pytest.mark.asyncio
    async def test_send_transaction(self, l2, function):
        wallet = Wallet(PRIVATE_KEY, l2)

        tx_hash = await wallet.send_transaction(function, gas=1_000_000)

        assert tx_hash == "0x" + "ab" * 32
        function.build_transaction.assert_awaited_once_with({
            "from": ADDRESS,
            "nonce": 7,
            "gas": 1_000_000,
        })
        l2.eth.get_transaction_count.assert_awaited_once_with(ADDRESS, "pending")
        l2.eth.send_raw_transaction.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_send_transaction_without_gas_lets_node_estimate(self, l2, function):
        wallet = Wallet(PRIVATE_KEY, l2)

        await wallet.send_transaction(function)

        params = function.build_transaction.await_args.args[0]
        assert "gas" not in params

    @pytest.mark.asyncio
    async def test_wait_for_receipt(self, l2):
        wallet = Wallet(PRIVATE_KEY, l2)

        receipt = await wallet.wait_for_receipt("0x" + "ab" * 32)

        assert receipt == {"status": 1, "gasUsed": 50000}
        l2.eth.wait_for_transaction_receipt.assert_awaited_once_with("0x" + "ab" * 32)
