from __future__ import annotations

import typing
from typing import Any, Generic, List, Literal, NewType, Optional, TypeVar, Union, cast

import eth_utils
import pydantic
from pydantic_core import core_schema

__all__ = [
    "Address",
    "Wei",
    "BlockParameter",
    "BlockData",
    "TxData",
    "TxHash",
    "TxParams",
]


class Address(str):
    def __new__(cls, value) -> Address:
        converted_value = value.lower()
        return super().__new__(cls, converted_value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(cls, core_schema.str_schema())

    def to_checksum_address(self) -> "ChecksumAddress":
        try:
            converted = eth_utils.to_checksum_address(self)
        except ValueError:
            raise ValueError(f"'{self}' is not a valid ETH address")
        return cast("ChecksumAddress", converted)


ChecksumAddress = NewType("ChecksumAddress", Address)
BlockTag = Literal["earliest", "latest", "pending"]
BlockParameter = Union[BlockTag, int]
Wei = NewType("Wei", int)
TxHash = NewType("TxHash", str)

TxParams = typing.TypedDict(
    "TxParams",
    {
        "from": Address,  # required by eth_sendTransaction
        "to": Address,  # optional when creating new contract
        "gas": int,  # optional, default 90000
        "gasPrice": int,  # optional
        "value": int,  # optional
        "data": str,  # compiled contract code or method call data
        "code": str,  # legacy name of "data"
        "nonce": int,  # optional
    },
    total=False,
)


def _quantity_to_int(v):
    return int(v, 16) if isinstance(v, str) else v


class TxData(pydantic.BaseModel):
    """
    https://eth.wiki/json-rpc/API#eth_gettransactionbyhash
    """

    model_config = pydantic.ConfigDict(populate_by_name=True)

    blockHash: Optional[str] = None  # `None` when transaction is pending
    blockNumber: Optional[int] = None  # `None` when transaction is pending
    from_address: Address = pydantic.Field(alias="from")
    gas: int
    gasPrice: Optional[int] = None
    hash: str  # 32 Bytes - hash of the transaction.
    input: str  # the data send along with the transaction
    nonce: int  # the number of transactions made by the sender prior to this one
    to_address: Optional[Address] = pydantic.Field(None, alias="to")  # None for contract creation
    transactionIndex: Optional[int] = None  # `None` when transaction is pending
    value: int
    v: Optional[int] = None  # ECDSA recovery id
    r: Optional[str] = None  # 32 Bytes - ECDSA signature r
    s: Optional[str] = None  # 32 Bytes - ECDSA signature s

    @pydantic.field_validator(
        "blockNumber",
        "gas",
        "gasPrice",
        "nonce",
        "transactionIndex",
        "value",
        "v",
        mode="before",
    )
    @classmethod
    def quantity_to_int(cls, v):
        return _quantity_to_int(v)


T = TypeVar("T", TxHash, TxData)


class BlockData(pydantic.BaseModel, Generic[T]):
    """A block or an uncle block

    `number`, `hash`, `nonce` and `logsBloom` are `None` for a pending block. Uncle blocks carry no
    transactions.
    """

    number: Optional[int] = None
    hash: Optional[str] = None
    parentHash: str
    nonce: Optional[str] = None
    sha3Uncles: str
    logsBloom: Optional[str] = None
    transactionsRoot: str
    stateRoot: str
    receiptsRoot: str
    miner: Address
    difficulty: int
    totalDifficulty: Optional[int] = None
    extraData: str
    size: int
    gasLimit: int
    gasUsed: int
    timestamp: int
    baseFeePerGas: Optional[int] = None
    transactions: List[T] = []
    uncles: List[str] = []

    @pydantic.field_validator(
        "number",
        "difficulty",
        "totalDifficulty",
        "size",
        "gasLimit",
        "gasUsed",
        "timestamp",
        "baseFeePerGas",
        mode="before",
    )
    @classmethod
    def quantity_to_int(cls, v):
        return _quantity_to_int(v)
