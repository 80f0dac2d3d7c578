import logging
from typing import Dict
from web3 import AsyncWeb3, AsyncHTTPProvider
from syncswap_lp.config import Settings, settings as default_settings
from syncswap_lp.services.wallet import Wallet

logger = logging.getLogger(__name__)

L1 = "l1"
L2 = "l2"


class Web3Manager:
    """Manages Web3 connections for the settlement chain and the rollup"""

    def __init__(self, settings: Settings = default_settings):
        self._settings = settings
        self._connections: Dict[str, AsyncWeb3] = {}
        self._setup_connections()

    def _setup_connections(self):
        """Initialize Web3 connections for both networks"""
        self._connections[L1] = AsyncWeb3(AsyncHTTPProvider(self._settings.get_l1_rpc_url()))
        self._connections[L2] = AsyncWeb3(AsyncHTTPProvider(self._settings.l2_rpc_url))

    @property
    def l1(self) -> AsyncWeb3:
        return self._connections[L1]

    @property
    def l2(self) -> AsyncWeb3:
        return self._connections[L2]

    async def check_connections(self) -> Dict[str, bool]:
        """Log reachability of each network without failing"""
        status = {}
        for network, w3 in self._connections.items():
            try:
                connected = await w3.is_connected()
            except Exception as e:
                logger.error(f"Error connecting to {network}: {e}")
                connected = False

            if connected:
                logger.info(f"Connected to {network} network")
            else:
                logger.error(f"Failed to connect to {network} network")
            status[network] = connected
        return status

    async def close(self):
        """Close the HTTP sessions held by each provider"""
        for network, w3 in self._connections.items():
            try:
                await w3.provider.disconnect()
            except Exception as e:
                logger.error(f"Error closing {network} connection: {e}")

    def create_wallet(self) -> Wallet:
        """Build a signing wallet bound to both networks"""
        return Wallet(self._settings.private_key, self.l2, self.l1)


# Global Web3 manager instance
web3_manager = Web3Manager()
