from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, Dict, Any, Union
from web3 import Web3
from web3.types import TxParams

DEFAULT_SLIPPAGE = 0.01

class BaseModelWithConfig(BaseModel):
    """Base model with common configuration"""
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    def model_dump(self, **kwargs) -> Dict[str, Any]:
        kwargs.setdefault("by_alias", True)
        data = super().model_dump(**kwargs)
        return self._remove_none_recursive(data)

    def _remove_none_recursive(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                k: self._remove_none_recursive(v)
                for k, v in data.items()
                if v is not None
            }
        elif isinstance(data, list):
            return [self._remove_none_recursive(item) for item in data]
        return data

class ApiModel(BaseModelWithConfig):
    """Response model that keeps any fields the API adds"""
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, extra="allow")

class SwapParams(BaseModelWithConfig):
    token_in: str = Field(alias="tokenIn")
    amount: int
    token_out: str = Field(alias="tokenOut")
    to: str
    slippage: float = DEFAULT_SLIPPAGE

    @field_validator("token_in", "token_out", "to")
    @classmethod
    def checksum_address(cls, value: str) -> str:
        return Web3.to_checksum_address(value)

    @model_validator(mode='after')
    def validate_swap(self) -> 'SwapParams':
        if self.amount <= 0:
            raise ValueError("amount must be positive")
        if not 0 <= self.slippage <= 1:
            raise ValueError("slippage must be a fraction between 0 and 1")
        # The router reverts with SameTokenInAndOut
        if self.token_in == self.token_out:
            raise ValueError("token_in and token_out must differ")

        return self

    def to_query_params(self) -> Dict[str, str]:
        """
        Serializes the params in the order the swap endpoint documents them
        """
        return {
            "tokenIn": self.token_in,
            "amount": str(self.amount),
            "tokenOut": self.token_out,
            "to": self.to,
            "slippage": format(Decimal(repr(self.slippage)).normalize(), "f"),
        }

class SwapTx(ApiModel):
    from_: str = Field(alias="from")
    to: str
    data: str
    value: int = 0

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, value: Union[int, str, None]) -> int:
        if value is None or value == "":
            return 0
        if isinstance(value, str):
            return int(value, 16) if value.startswith(("0x", "0X")) else int(value)
        return value

    def to_tx_params(self) -> TxParams:
        return {
            "from": Web3.to_checksum_address(self.from_),
            "to": Web3.to_checksum_address(self.to),
            "data": self.data,
            "value": self.value,
        }

class SwapTokenInfo(ApiModel):
    input_token: str = Field(alias="inputToken")
    input_amount: int = Field(alias="inputAmount")
    output_token: str = Field(alias="outputToken")
    output_quote: int = Field(alias="outputQuote")
    output_min: int = Field(alias="outputMin")
    output_receiver: str = Field(alias="outputReceiver")

class RouterParams(ApiModel):
    swap_token_info: SwapTokenInfo = Field(alias="swapTokenInfo")
    path_definition: str = Field(alias="pathDefinition")
    executor: str
    referral_code: int = Field(alias="referralCode", default=0)

class SwapResponse(ApiModel):
    # A response without a route (e.g. no liquidity) carries only a status
    status: Optional[str] = None
    tx: Optional[SwapTx] = None
    router_params: Optional[RouterParams] = Field(alias="routerParams", default=None)
    router_addr: Optional[str] = Field(alias="routerAddr", default=None)

    def has_route(self) -> bool:
        return self.tx is not None
