"""Methods and properties of the `eth` API

A method descriptor looks like this:

    MethodDescriptor(
        name="getBlock",
        call=block_call,
        params=1,
        input_formatter=[to_hex, None],  # a function, or one function per parameter
        output_formatter=output_block_formatter,
    )

`methods` and `properties` are built once at import and never change.
"""

import logging
from typing import Dict, Iterable, Tuple, TypeVar

from . import formatters
from .endpoints import RPCMethod
from .exceptions import DuplicateDescriptorError
from .method import MethodDescriptor, PropertyDescriptor
from .selectors import (
    block_call,
    block_transaction_count_call,
    transaction_from_block_call,
    uncle_call,
    uncle_count_call,
)

logger = logging.getLogger(__name__)

D = TypeVar("D", MethodDescriptor, PropertyDescriptor)


methods: Tuple[MethodDescriptor, ...] = (
    MethodDescriptor(
        name="getBalance",
        call=RPCMethod.eth_getBalance,
        params=2,
        output_formatter=formatters.output_number_formatter,
    ),
    MethodDescriptor(
        name="getStorageAt",
        call=RPCMethod.eth_getStorageAt,
        params=3,
    ),
    MethodDescriptor(
        name="getCode",
        call=RPCMethod.eth_getCode,
        params=2,
    ),
    MethodDescriptor(
        name="getBlock",
        call=block_call,
        params=1,
        input_formatter=formatters.input_block_formatter,
        output_formatter=formatters.output_block_formatter,
    ),
    MethodDescriptor(
        name="getUncle",
        call=uncle_call,
        params=1,
        input_formatter=formatters.input_uncle_formatter,
        output_formatter=formatters.output_block_formatter,
    ),
    MethodDescriptor(
        name="getCompilers",
        call=RPCMethod.eth_getCompilers,
        params=0,
    ),
    MethodDescriptor(
        name="getBlockTransactionCount",
        call=block_transaction_count_call,
        params=1,
        input_formatter=formatters.to_hex,
        output_formatter=formatters.to_decimal,
    ),
    MethodDescriptor(
        name="getBlockUncleCount",
        call=uncle_count_call,
        params=1,
        input_formatter=formatters.to_hex,
        output_formatter=formatters.to_decimal,
    ),
    MethodDescriptor(
        name="getTransaction",
        call=RPCMethod.eth_getTransactionByHash,
        params=1,
        output_formatter=formatters.output_transaction_formatter,
    ),
    MethodDescriptor(
        name="getTransactionFromBlock",
        call=transaction_from_block_call,
        params=2,
        # only the block is formatted, the index goes out as given
        input_formatter=formatters.to_hex,
        output_formatter=formatters.output_transaction_formatter,
    ),
    MethodDescriptor(
        name="getTransactionCount",
        call=RPCMethod.eth_getTransactionCount,
        params=2,
        output_formatter=formatters.to_decimal,
    ),
    MethodDescriptor(
        name="call",
        call=RPCMethod.eth_call,
        params=2,
        input_formatter=formatters.input_call_formatter,
    ),
    MethodDescriptor(
        name="sendTransaction",
        call=RPCMethod.eth_sendTransaction,
        params=1,
        input_formatter=formatters.input_transaction_formatter,
    ),
    MethodDescriptor(
        name="compile.solidity",
        call=RPCMethod.eth_compileSolidity,
        params=1,
    ),
    MethodDescriptor(
        name="compile.lll",
        call=RPCMethod.eth_compileLLL,
        params=1,
        input_formatter=formatters.to_hex,
    ),
    MethodDescriptor(
        name="compile.serpent",
        call=RPCMethod.eth_compileSerpent,
        params=1,
        input_formatter=formatters.to_hex,
    ),
    MethodDescriptor(
        name="flush",
        call=RPCMethod.eth_flush,
        params=0,
    ),
)


properties: Tuple[PropertyDescriptor, ...] = (
    PropertyDescriptor(name="coinbase", getter=RPCMethod.eth_coinbase),
    PropertyDescriptor(name="mining", getter=RPCMethod.eth_mining),
    PropertyDescriptor(
        name="gasPrice",
        getter=RPCMethod.eth_gasPrice,
        output_formatter=formatters.output_number_formatter,
    ),
    PropertyDescriptor(name="accounts", getter=RPCMethod.eth_accounts),
    PropertyDescriptor(
        name="blockNumber",
        getter=RPCMethod.eth_blockNumber,
        output_formatter=formatters.to_decimal,
    ),
    # deprecated properties
    PropertyDescriptor(
        name="listening",
        getter=RPCMethod.net_listening,
        setter=RPCMethod.eth_setListening,
        deprecated="net.listening",
    ),
    PropertyDescriptor(
        name="peerCount",
        getter=RPCMethod.net_peerCount,
        deprecated="net.peerCount",
    ),
    PropertyDescriptor(
        name="number",
        getter=RPCMethod.eth_number,
        deprecated="eth.blockNumber",
    ),
)


def index_by_name(descriptors: Iterable[D], table: str) -> Dict[str, D]:
    """Map descriptor names to descriptors, rejecting duplicate names"""
    index: Dict[str, D] = {}
    for descriptor in descriptors:
        if descriptor.name in index:
            raise DuplicateDescriptorError(descriptor.name, table)
        index[descriptor.name] = descriptor
    return index


_methods_by_name = index_by_name(methods, "method")
_properties_by_name = index_by_name(properties, "property")
logger.debug(
    "built %d method descriptors and %d property descriptors", len(methods), len(properties)
)


def get_method(name: str) -> MethodDescriptor:
    return _methods_by_name[name]


def get_property(name: str) -> PropertyDescriptor:
    return _properties_by_name[name]


def method_names() -> Tuple[str, ...]:
    return tuple(m.name for m in methods)


def property_names() -> Tuple[str, ...]:
    return tuple(p.name for p in properties)
