# config.py
import os
from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from tools.signers import get_signers
from tools.tasks import task

logging = getLogger(__name__)

DEFAULT_NETWORK = "hardhat"

ALCHEMY_URLS = {
    "mainnet": "https://eth.alchemyapi.io/v2/{key}",
    "rinkeby": "https://eth-rinkeby.alchemyapi.io/v2/{key}",
    "kovan": "https://eth-kovan.alchemyapi.io/v2/{key}",
    "ropsten": "https://eth-ropsten.alchemyapi.io/v2/{key}",
}

MORALIS_BSC_MAINNET = "https://speedy-nodes-nyc.moralis.io/{key}/bsc/mainnet"
MORALIS_BSC_TESTNET_ARCHIVE = "https://speedy-nodes-nyc.moralis.io/{key}/bsc/testnet/archive"
ALCHEMY_MUMBAI = "https://polygon-mumbai.g.alchemy.com/v2/{key}"

FORK_BLOCK_NUMBER = 14328500
FORK_BLOCK_GAS_LIMIT = 12000000
TEST_TIMEOUT_MS = 10000 * 1000


class UnknownNetworkError(KeyError):
    def __str__(self):
        return f"Network {self.args[0]} doesn't exist"


@dataclass(frozen=True)
class CompilerProfile:
    version: str
    optimizer_enabled: bool
    optimizer_runs: int


@dataclass(frozen=True)
class ForkingProfile:
    url: str
    block_number: int


@dataclass(frozen=True)
class NetworkProfile:
    name: str
    url: Optional[str] = None
    accounts: Tuple[str, ...] = ()
    forking: Optional[ForkingProfile] = None
    block_gas_limit: Optional[int] = None

    def as_dict(self) -> dict:
        profile = {}
        if self.url is not None:
            profile["url"] = self.url
        if self.accounts:
            profile["accounts"] = list(self.accounts)
        if self.forking is not None:
            profile["forking"] = {"url": self.forking.url, "blockNumber": self.forking.block_number}
        if self.block_gas_limit is not None:
            profile["blockGasLimit"] = self.block_gas_limit
        return profile


@dataclass(frozen=True)
class ToolchainConfig:
    """Static toolchain configuration, built once from the environment."""

    compilers: Tuple[CompilerProfile, ...]
    networks: Mapping[str, NetworkProfile]
    etherscan_api_key: Optional[str] = None
    test_timeout_ms: int = TEST_TIMEOUT_MS
    default_network: str = DEFAULT_NETWORK
    # names of the variables that were missing at load time
    missing: Tuple[str, ...] = field(default=(), compare=False)

    def as_dict(self) -> dict:
        """Nested configuration in the shape the toolchain consumes."""
        return {
            "defaultNetwork": self.default_network,
            "solidity": {
                "compilers": [
                    {
                        "version": c.version,
                        "settings": {"optimizer": {"enabled": c.optimizer_enabled, "runs": c.optimizer_runs}},
                    }
                    for c in self.compilers
                ],
            },
            "networks": {name: profile.as_dict() for name, profile in self.networks.items()},
            "etherscan": {"apiKey": self.etherscan_api_key},
            "mocha": {"timeout": self.test_timeout_ms},
        }


def load_config(environ=None) -> ToolchainConfig:
    """
    Build the toolchain configuration from environment variables.

    Args:
        environ (Mapping): variables to read; defaults to os.environ after loading .env.

    Returns:
        ToolchainConfig: missing variables are substituted with "" and never raise.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        environ = os.environ

    missing = []

    def env(name):
        value = environ.get(name)
        if value is None:
            logging.debug("%s is not set, substituting an empty string", name)
            missing.append(name)
            return ""
        return value

    alchemy_key = env("ALCHEMY_API_KEY")
    moralis_key = env("MORALIS_API_KEY")
    signing_accounts = (f"0x{env('PRIVATE_KEY')}",)

    networks = {
        "hardhat": NetworkProfile(
            name="hardhat",
            forking=ForkingProfile(
                url=MORALIS_BSC_TESTNET_ARCHIVE.format(key=moralis_key),
                block_number=FORK_BLOCK_NUMBER,
            ),
            block_gas_limit=FORK_BLOCK_GAS_LIMIT,
        ),
    }
    for name, template in ALCHEMY_URLS.items():
        networks[name] = NetworkProfile(name=name, url=template.format(key=alchemy_key), accounts=signing_accounts)
    networks["bsc"] = NetworkProfile(name="bsc", url=MORALIS_BSC_MAINNET.format(key=moralis_key), accounts=signing_accounts)
    networks["bsctest"] = NetworkProfile(
        name="bsctest", url=MORALIS_BSC_TESTNET_ARCHIVE.format(key=moralis_key), accounts=signing_accounts
    )
    networks["mumbai"] = NetworkProfile(name="mumbai", url=ALCHEMY_MUMBAI.format(key=alchemy_key), accounts=signing_accounts)

    etherscan_api_key = environ.get("BSCSCAN_API_KEY")
    if etherscan_api_key is None:
        missing.append("BSCSCAN_API_KEY")

    return ToolchainConfig(
        compilers=(CompilerProfile(version="0.6.12", optimizer_enabled=True, optimizer_runs=1000),),
        networks=MappingProxyType(networks),
        etherscan_api_key=etherscan_api_key,
        test_timeout_ms=TEST_TIMEOUT_MS,
        default_network=environ.get("HARDHAT_NETWORK") or DEFAULT_NETWORK,
        missing=tuple(missing),
    )


def get_network(config, name=None) -> NetworkProfile:
    if name is None:
        name = config.default_network
    if name not in config.networks:
        raise UnknownNetworkError(name)
    return config.networks[name]


@task("accounts", "Prints the list of accounts")
def accounts(network):
    for address in get_signers(network):
        print(address)


CONFIG = load_config()
