import pytest

from ethapi import types


def test_Address_convert_to_lower_case():
    checksum_address = "0x18C2ccD3e937bb5b1560A6f70DE9bDB1340D849d"
    assert types.Address(checksum_address) == checksum_address.lower()


def test_Address_type():
    address_str = "0x18C2ccD3e937bb5b1560A6f70DE9bDB1340D849d"
    address = types.Address(address_str)
    assert type(address) == types.Address
    assert isinstance(address, str)


def test_Address_to_checksum_address():
    address_str = "0x18C2ccD3e937bb5b1560A6f70DE9bDB1340D849d"
    checksum_address = types.Address(address_str).to_checksum_address()
    assert isinstance(checksum_address, str)
    assert checksum_address == address_str


def test_Address_to_checksum_address_raises_on_incorrect_address():
    address = "0x18C2ccD3e937bb5b1560A6f70DE9bDB1340D849d"
    with pytest.raises(ValueError):
        types.Address(address[:-1]).to_checksum_address()


def test_TxData_can_parse():
    data = {
        "blockHash": "0x1d59ff54b1eb26b013ce3cb5fc9dab3705b415a67127a003c3e61eb445bb8df2",
        "blockNumber": "0x5daf3b",  # 6139707
        "from": "0xa7d9ddbe1f17865597fbd27ec712455208b6b76d",
        "gas": "0xc350",  # 50000
        "gasPrice": "0x4a817c800",  # 20000000000
        "hash": "0x88df016429689c079f3b2f6ad39fa052532c56795b733da78a91ebe6a713944b",
        "input": "0x68656c6c6f21",
        "nonce": "0x15",  # 21
        "to": "0xf02c1c8e6114b1dbe8937a39260b5b0a374432bb",
        "transactionIndex": "0x41",  # 65
        "value": "0xf3dbb76162000",  # 4290000000000000
        "v": "0x25",  # 37
        "r": "0x1b5e176d927f8e9ab405058b2d2457392da3e20f328b16ddabcebc33eaac5fea",
        "s": "0x4ba69724e8f69de52f0125ad8b3c5c2cef33019bac3249e2c0a2192766d1721c",
    }
    parsed = types.TxData(**data)
    assert type(parsed.from_address) == types.Address
    assert type(parsed.to_address) == types.Address
    assert parsed.blockNumber == 6139707
    assert parsed.gas == 50000
    assert parsed.gasPrice == 20000000000
    assert parsed.nonce == 21
    assert parsed.value == 4290000000000000
    assert parsed.transactionIndex == 65
    assert parsed.v == 37


def test_TxData_parses_pending_contract_creation():
    data = {
        "blockHash": None,
        "blockNumber": None,
        "from": "0xA7D9DDBE1F17865597FBD27EC712455208B6B76D",
        "gas": "0xc350",
        "gasPrice": "0x4a817c800",
        "hash": "0x88df016429689c079f3b2f6ad39fa052532c56795b733da78a91ebe6a713944b",
        "input": "0x6060",
        "nonce": "0x0",
        "to": None,
        "transactionIndex": None,
        "value": "0x0",
    }
    parsed = types.TxData(**data)
    assert parsed.blockNumber is None
    assert parsed.to_address is None
    assert parsed.from_address == "0xa7d9ddbe1f17865597fbd27ec712455208b6b76d"


def test_Address_to_checksum_address_has_keccak_backend():
    from eth_hash.auto import keccak

    assert keccak(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    address = types.Address("0xa7d9ddbe1f17865597fbd27ec712455208b6b76d")
    assert address.to_checksum_address().lower() == address
