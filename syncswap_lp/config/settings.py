from decimal import Decimal
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from web3 import Web3


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Credentials - read from .env, checked only when a component needs them
    alchemy_api_key: Optional[str] = None
    private_key: Optional[str] = None

    # Network Configuration
    l1_network: str = "goerli"
    l2_rpc_url: str = "https://zksync2-testnet.zksync.dev"
    explorer_url: str = "https://goerli.explorer.zksync.io"

    # Contracts (SyncSwap staging testnet)
    weth_address: str = "0x20b28B1e4665FFf290650586ad76E977EAb90c5D"
    usdc_address: str = "0x0faF6df7054946141266420b43783387A78d82A9"
    router_address: str = "0xB3b7fCbb8Db37bC6f572634299A58f51622A847e"
    pool_factory_address: str = "0xf2FD2bc2fBC12842aAb6FbB8b1159a6a83E72006"

    # Transaction parameters
    gas_limit: int = 1_000_000
    min_liquidity: int = 1  # no real slippage protection

    # Amounts to provide, in human units
    eth_amount: Decimal = Decimal("0.00001")
    usdc_amount: Decimal = Decimal("100000")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_prefix="",  # No prefix for env vars
    )

    @field_validator(
        "weth_address", "usdc_address", "router_address", "pool_factory_address"
    )
    @classmethod
    def checksum_address(cls, value: str) -> str:
        return Web3.to_checksum_address(value.lower())

    def get_l1_rpc_url(self) -> str:
        """Get Alchemy RPC URL for the settlement chain"""
        return f"https://eth-{self.l1_network}.g.alchemy.com/v2/{self.alchemy_api_key or ''}"

    def get_tx_url(self, tx_hash: str) -> str:
        """Get explorer URL for a rollup transaction"""
        return f"{self.explorer_url.rstrip('/')}/tx/{tx_hash}"


settings = Settings()
