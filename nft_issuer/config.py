"""Issuer configuration."""
import collections
import os

import stellar_sdk

DEFAULT_HORIZON_URL = 'https://horizon-testnet.stellar.org'
DEFAULT_NETWORK_PASSPHRASE = stellar_sdk.Network.TESTNET_NETWORK_PASSPHRASE
# Network minimum, in stroops per operation.
MIN_BASE_FEE = 100
DEFAULT_ASSET_CODE = 'EigerNFT'
DEFAULT_DATA_NAME = 'nftsource'
DEFAULT_DATA_VALUE = 'https://www.eiger.co'

Config = collections.namedtuple('Config', [
    'horizon_url', 'network_passphrase', 'base_fee', 'asset_code', 'data_name', 'data_value'])


def from_env(environ=None, **overrides):
    """
    Build a Config from NFT_* environment variables.
    Keyword arguments that are not None take precedence over the environment.
    """
    environ = os.environ if environ is None else environ
    config = Config(
        horizon_url=environ.get('NFT_HORIZON_URL', DEFAULT_HORIZON_URL),
        network_passphrase=environ.get('NFT_NETWORK_PASSPHRASE', DEFAULT_NETWORK_PASSPHRASE),
        base_fee=int(environ.get('NFT_BASE_FEE', MIN_BASE_FEE)),
        asset_code=environ.get('NFT_ASSET_CODE', DEFAULT_ASSET_CODE),
        data_name=environ.get('NFT_DATA_NAME', DEFAULT_DATA_NAME),
        data_value=environ.get('NFT_DATA_VALUE', DEFAULT_DATA_VALUE))
    config = config._replace(**{key: value for key, value in overrides.items() if value is not None})
    assert config.base_fee >= MIN_BASE_FEE, "base fee must be at least {} stroops".format(MIN_BASE_FEE)
    return config
