import logging
from typing import Any, Dict, Optional
from eth_account import Account
from web3 import AsyncWeb3, Web3
from syncswap_lp.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Wallet:
    """Local signing account bound to the rollup, with the settlement chain alongside"""

    def __init__(self, private_key: Optional[str], l2: AsyncWeb3, l1: Optional[AsyncWeb3] = None):
        if not private_key:
            raise ConfigurationError("PRIVATE_KEY is not set")
        self._account = Account.from_key(private_key)
        self.l2 = l2
        self.l1 = l1

    @property
    def address(self) -> str:
        return self._account.address

    async def send_transaction(self, function, gas: Optional[int] = None) -> str:
        """
        Build, sign and broadcast a contract call on the rollup.
        Returns the transaction hash as a 0x-prefixed hex string.
        """
        tx_params: Dict[str, Any] = {
            "from": self.address,
            "nonce": await self.l2.eth.get_transaction_count(self.address, "pending"),
        }
        if gas is not None:
            tx_params["gas"] = gas

        tx = await function.build_transaction(tx_params)
        signed = self._account.sign_transaction(tx)
        tx_hash = await self.l2.eth.send_raw_transaction(signed.raw_transaction)
        return Web3.to_hex(tx_hash)

    async def wait_for_receipt(self, tx_hash: str) -> Dict[str, Any]:
        """Wait until the transaction is mined"""
        receipt = await self.l2.eth.wait_for_transaction_receipt(tx_hash)
        return dict(receipt)
