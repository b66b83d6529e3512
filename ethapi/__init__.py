from .endpoints import RPCMethod
from .eth import get_method, get_property, method_names, methods, properties, property_names
from .exceptions import DescriptorError, DuplicateDescriptorError, InvalidDescriptorError
from .method import (
    ComputedCall,
    FixedCall,
    MethodDescriptor,
    NoFormatter,
    PerArgumentFormatter,
    PropertyDescriptor,
    SingleFormatter,
)
from .selectors import (
    block_call,
    block_transaction_count_call,
    transaction_from_block_call,
    uncle_call,
    uncle_count_call,
)
from .types import Address, BlockData, BlockParameter, TxData, TxHash, TxParams, Wei
