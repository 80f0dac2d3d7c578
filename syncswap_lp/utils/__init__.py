from .abi import *
from .helpers import *

__all__ = [
    "ZERO_ADDRESS", "CLASSIC_POOL_FACTORY_ABI", "CLASSIC_POOL_ABI", "ROUTER_ABI",
    "ERC20_ABI", "WETH_DECIMALS", "USDC_DECIMALS",
    "parse_units", "parse_ether", "format_units", "normalize_address",
    "is_zero_address", "encode_receiver_data"
]
