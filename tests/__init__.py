"""nft_issuer tests"""
import json
import unittest.mock

import stellar_sdk
import stellar_sdk.client.response

from nft_issuer import config
from nft_issuer import logger

logger.setup('DEBUG')

LOGGER = logger.logging.getLogger('nft.issuer.test')
TEST_CONFIG = config.from_env(environ={})
TEST_SEQUENCE = 12345


def new_seeds(number):
    """Generate seeds of brand new keypairs."""
    return [stellar_sdk.Keypair.random().secret for _ in range(number)]


def corrupt_seed(seed):
    """Break the checksum of a seed by changing its last character."""
    return seed[:-1] + ('A' if seed[-1] != 'A' else 'B')


def horizon_response(status_code, **body):
    """A raw Horizon response, as the SDK exceptions expect it."""
    return stellar_sdk.client.response.Response(
        status_code=status_code, text=json.dumps(body), headers={}, url='https://horizon.test/transactions')


def mock_server(sequence=TEST_SEQUENCE, submit_hash='f' * 64):
    """A Horizon server double answering load_account and submit_transaction."""
    server = unittest.mock.Mock()
    server.load_account.side_effect = lambda address: stellar_sdk.Account(address, sequence)
    server.submit_transaction.return_value = {'hash': submit_hash, 'successful': True}
    return server
