from decimal import Decimal, localcontext
from typing import Union

from eth_abi import encode
from web3 import Web3

from .abi import ZERO_ADDRESS


def parse_units(amount: Union[int, float, str, Decimal], decimals: int) -> int:
    """
    Convert a human readable amount to base units.
    Floats go through their shortest string form so 0.00001 stays exact.
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))

    with localcontext() as ctx:
        ctx.prec = 100
        scaled = amount.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(f"Fractional component of {amount} exceeds {decimals} decimals")
        return int(scaled)


def parse_ether(amount: Union[int, float, str, Decimal]) -> int:
    return parse_units(amount, 18)


def format_units(amount: Union[int, str], decimals: int) -> str:
    """
    Format token amount from base units to human readable format
    """
    if isinstance(amount, str):
        amount = int(amount)

    with localcontext() as ctx:
        ctx.prec = 100
        return format(Decimal(amount).scaleb(-decimals).normalize(), "f")


def normalize_address(address: str) -> str:
    """
    Normalize Ethereum address to checksum format
    """
    return Web3.to_checksum_address(address.lower())


def is_zero_address(address: str) -> bool:
    return address.lower() == ZERO_ADDRESS


def encode_receiver_data(receiver: str) -> bytes:
    """
    ABI-encode the liquidity receiver as the router's auxiliary data
    """
    return encode(["address"], [normalize_address(receiver)])
