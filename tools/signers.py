import re

from eth_keys import keys
from eth_keys.exceptions import ValidationError


PRIVATE_KEY_PATTERN = re.compile(r"(0x)?[0-9a-fA-F]{64}")


class InvalidPrivateKeyError(ValueError):
    pass


def private_key_to_address(private_key: str) -> str:
    """
    Derive the checksummed address controlled by a private key.

    Args:
        private_key (str): 32-byte hex key, with or without 0x prefix.

    Returns:
        str: checksummed address, e.g. 0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf
    """
    if not isinstance(private_key, str):
        raise InvalidPrivateKeyError(f"Invalid private key: expected a hex string, got {type(private_key).__name__}")
    if not PRIVATE_KEY_PATTERN.fullmatch(private_key):
        raise InvalidPrivateKeyError(f"Invalid private key: expected 32 bytes of hex, got {len(private_key)} characters")
    key_bytes = bytes.fromhex(private_key[2:] if private_key.startswith("0x") else private_key)
    try:
        public_key = keys.PrivateKey(key_bytes).public_key
    except ValidationError as e:
        raise InvalidPrivateKeyError("Invalid private key: scalar out of range for secp256k1") from e
    return public_key.to_checksum_address()


def get_signers(network):
    """Addresses of every signing credential configured on a network profile, in order."""
    return [private_key_to_address(account) for account in network.accounts]
