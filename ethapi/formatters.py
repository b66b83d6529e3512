"""Value formatters referenced by the eth method and property tables

Input formatters convert caller arguments into their JSON-RPC wire form; output formatters convert
raw RPC results into Python values.
"""

import json
import typing
from typing import Any, Dict, Optional, Union

import eth_utils

from .types import Address, BlockData, BlockParameter, BlockTag, TxData, TxHash, TxParams, Wei

DEFAULT_BLOCK: BlockTag = "latest"

_BLOCK_TAGS = ("earliest", "latest", "pending")


def _unsigned(value: str) -> str:
    return value[1:] if value.startswith("-") else value


def _is_number(value: str) -> bool:
    """Whether a string is a, possibly negative, hex or decimal number"""
    unsigned = _unsigned(value)
    return eth_utils.is_0x_prefixed(unsigned) or unsigned.isdigit()


def to_hex(value: Any) -> Optional[str]:
    """Convert a value to its "0x"-prefixed hex form

    Numbers, including strings of (signed) decimal digits, become hex quantities. Other strings are
    hex-encoded as UTF-8 text, and strings that are already hex are returned as they are.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "0x1" if value else "0x0"
    if isinstance(value, int):
        return hex(value)
    if isinstance(value, (bytes, bytearray)):
        return eth_utils.to_hex(bytes(value))
    if isinstance(value, str):
        if _is_number(value):
            if eth_utils.is_0x_prefixed(_unsigned(value)):
                return value
            return hex(int(value))
        return eth_utils.to_hex(text=value)
    if isinstance(value, (dict, list)):
        return eth_utils.to_hex(text=json.dumps(value))
    raise TypeError(f"Cannot convert {value!r} to hex")


def to_decimal(value: Union[str, int, None]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        if eth_utils.is_0x_prefixed(value):
            return eth_utils.to_int(hexstr=value)
        return int(value)
    raise TypeError(f"Cannot convert {value!r} to a number")


def output_number_formatter(value: Union[str, int, None]) -> Optional[Wei]:
    number = to_decimal(value)
    if number is None:
        return None
    return Wei(number)


def input_block_formatter(block: Union[BlockParameter, str, None]) -> str:
    if block is None:
        return DEFAULT_BLOCK
    if block in _BLOCK_TAGS:
        return typing.cast(str, block)
    if isinstance(block, str) and not _is_number(block):
        raise ValueError(f"'{block}' is neither a block number, a block hash nor a block tag")
    return typing.cast(str, to_hex(block))


def input_uncle_formatter(block: Union[BlockParameter, str, None]) -> str:
    # uncles are looked up through the block that includes them
    return input_block_formatter(block)


def output_block_formatter(
    result: Optional[Dict[str, Any]]
) -> Union[BlockData[TxHash], BlockData[TxData], None]:
    """Parse a raw block into `BlockData`

    A block requested with full transaction objects is parsed into `BlockData[TxData]`, otherwise
    into `BlockData[TxHash]`.
    """
    if result is None:
        return None
    transactions = result.get("transactions") or []
    if transactions and isinstance(transactions[0], dict):
        return BlockData[TxData](**result)
    return BlockData[TxHash](**result)


def output_transaction_formatter(result: Optional[Dict[str, Any]]) -> Optional[TxData]:
    if result is None:
        return None
    return TxData(**result)


def _format_params(options: typing.Mapping[str, Any]) -> Dict[str, Any]:
    if not isinstance(options, typing.Mapping):
        raise TypeError(f"Expected transaction parameters, got {options!r}")
    params = dict(options)
    if "code" in params:
        params["data"] = params.pop("code")
    for key in ("from", "to"):
        if params.get(key) is not None:
            params[key] = Address(params[key]).to_checksum_address()
    return {k: hex(v) if isinstance(v, int) else v for k, v in params.items()}


def input_call_formatter(options: TxParams) -> Dict[str, Any]:
    """
    https://eth.wiki/json-rpc/API#eth_call
    """
    return _format_params(options)


def input_transaction_formatter(options: TxParams) -> Dict[str, Any]:
    """
    https://eth.wiki/json-rpc/API#eth_sendtransaction
    """
    params = _format_params(options)
    if params.get("from") is None:
        raise ValueError(f"Transaction {options!r} has no 'from' address")
    return params
