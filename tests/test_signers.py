from types import SimpleNamespace

import pytest

from tools.signers import InvalidPrivateKeyError, get_signers, private_key_to_address

# default account #0 of local development nodes
DEV_KEY = "ac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

ONE_KEY = "0x" + "00" * 31 + "01"
ONE_ADDRESS = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"


def test_known_keys_resolve_to_checksummed_addresses():
    assert private_key_to_address("0x" + DEV_KEY) == DEV_ADDRESS
    assert private_key_to_address(DEV_KEY) == DEV_ADDRESS
    assert private_key_to_address(ONE_KEY) == ONE_ADDRESS


@pytest.mark.parametrize("bad_key", ["0x", "0xABC", "", "0x" + "zz" * 32, "0x" + "00" * 32, "0x" + "ff" * 32, None, 5, b"\x01" * 32])
def test_malformed_keys_are_rejected(bad_key):
    with pytest.raises(InvalidPrivateKeyError):
        private_key_to_address(bad_key)


def test_get_signers_keeps_order():
    network = SimpleNamespace(accounts=("0x" + DEV_KEY, ONE_KEY))
    assert get_signers(network) == [DEV_ADDRESS, ONE_ADDRESS]


def test_get_signers_without_accounts():
    assert get_signers(SimpleNamespace(accounts=())) == []


def test_out_of_range_scalar_does_not_echo_key():
    with pytest.raises(InvalidPrivateKeyError) as excinfo:
        private_key_to_address("ff" * 32)
    assert str(excinfo.value) == "Invalid private key: scalar out of range for secp256k1"
    assert "ff" not in str(excinfo.value)


def test_non_string_key_reports_type():
    with pytest.raises(InvalidPrivateKeyError) as excinfo:
        private_key_to_address(5)
    assert str(excinfo.value) == "Invalid private key: expected a hex string, got int"
