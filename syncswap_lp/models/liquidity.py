from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict


class BaseModelWithConfig(BaseModel):
    model_config = ConfigDict(frozen=True)


class TokenAmount(BaseModelWithConfig):
    """Human amount of a token together with its base-unit value"""
    address: str
    symbol: str
    decimals: int
    amount: Decimal
    base_units: int


class TokenInput(BaseModelWithConfig):
    """Router token input (token, amount)"""
    token: str
    amount: int


class PoolState(BaseModelWithConfig):
    """Classic pool snapshot"""
    address: str
    token0: str
    token1: str
    reserve0: int
    reserve1: int


class TransactionStatus(str, Enum):
    CONFIRMED = "confirmed"
    REVERTED = "reverted"
    FAILED = "failed"


class LiquidityResult(BaseModelWithConfig):
    """Outcome of the add-liquidity transaction"""
    status: TransactionStatus
    pool_address: str
    tx_hash: Optional[str] = None
    explorer_url: Optional[str] = None
    receipt: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == TransactionStatus.CONFIRMED

    @property
    def gas_used(self) -> Optional[int]:
        if self.receipt is None:
            return None
        return self.receipt.get("gasUsed")
