"""Call selectors for operations that accept either a block hash or a block number

Each selector receives the positional arguments of the call and returns the RPC method name to
send over the wire. A first argument that is a "0x"-prefixed string is taken to be a hash;
anything else (a block number, a tag such as "latest", or nothing at all) selects the by-number
variant.
"""

from typing import Any, Sequence

from .endpoints import RPCMethod


def _is_hash(args: Sequence[Any]) -> bool:
    return bool(args) and isinstance(args[0], str) and args[0].startswith("0x")


def block_call(args: Sequence[Any]) -> str:
    if _is_hash(args):
        return RPCMethod.eth_getBlockByHash
    return RPCMethod.eth_getBlockByNumber


def transaction_from_block_call(args: Sequence[Any]) -> str:
    if _is_hash(args):
        return RPCMethod.eth_getTransactionByBlockHashAndIndex
    return RPCMethod.eth_getTransactionByBlockNumberAndIndex


def uncle_call(args: Sequence[Any]) -> str:
    if _is_hash(args):
        return RPCMethod.eth_getUncleByBlockHashAndIndex
    return RPCMethod.eth_getUncleByBlockNumberAndIndex


def block_transaction_count_call(args: Sequence[Any]) -> str:
    if _is_hash(args):
        return RPCMethod.eth_getBlockTransactionCountByHash
    return RPCMethod.eth_getBlockTransactionCountByNumber


def uncle_count_call(args: Sequence[Any]) -> str:
    if _is_hash(args):
        return RPCMethod.eth_getUncleCountByBlockHash
    return RPCMethod.eth_getUncleCountByBlockNumber
