"""Issue an NFT: trust, payment, metadata and issuer lock in one transaction."""
import collections
import logging

import nft_issuer
from nft_issuer import keys
from nft_issuer import operations as ops
from nft_issuer import transaction

LOGGER = logging.getLogger('nft.issuer.issue')

UNSTARTED = 'unstarted'
KEYS_RESOLVED = 'keys_resolved'
ACCOUNT_FETCHED = 'account_fetched'
OPERATIONS_BUILT = 'operations_built'
SIGNED = 'signed'
SUBMITTED = 'submitted'

IssuanceResult = collections.namedtuple('IssuanceResult', ['stage', 'asset_id', 'transaction_hash', 'error'])


class Progress:
    """Last stage reached by a run. Stages only move forward."""
    STAGES = (UNSTARTED, KEYS_RESOLVED, ACCOUNT_FETCHED, OPERATIONS_BUILT, SIGNED, SUBMITTED)

    def __init__(self):
        self.stage = UNSTARTED

    def advance(self, stage):
        """Move to stage, which must directly follow the current one."""
        assert self.STAGES.index(stage) == self.STAGES.index(self.stage) + 1, \
            "can't move from {} to {}".format(self.stage, stage)
        LOGGER.debug("%s -> %s", self.stage, stage)
        self.stage = stage


def issue(config, horizon, issuer_seed, distributor_seed, receiver_seeds, progress=None):
    """
    Issue config.asset_code from the issuer to the distributor and lock the issuer.
    receiver_seeds is an already split sequence of seeds.
    Returns (asset_id, submission response). Raises IssuanceError on the first failure.
    """
    progress = progress or Progress()

    issuer = keys.resolve(issuer_seed)
    distributor = keys.resolve(distributor_seed)
    receivers = keys.build_receivers(receiver_seeds)
    keys.check_overlap(issuer, distributor, receivers)
    progress.advance(KEYS_RESOLVED)

    sequence = horizon.get_sequence(issuer.public_key)
    progress.advance(ACCOUNT_FETCHED)

    asset = ops.asset_descriptor(config.asset_code, issuer.public_key)
    operations = ops.build_operations(
        asset, issuer, distributor, receivers, config.data_name, config.data_value)
    signers = ops.signer_set(issuer, distributor, receivers)
    progress.advance(OPERATIONS_BUILT)

    envelope = transaction.assemble(issuer.public_key, sequence, operations, config)
    transaction.sign(envelope, signers)
    progress.advance(SIGNED)

    response = horizon.submit(envelope)
    progress.advance(SUBMITTED)
    return ops.asset_id(asset), response


def run(config, horizon, issuer_seed, distributor_seed, receiver_seeds):
    """Issue and report the outcome as an IssuanceResult instead of raising."""
    progress = Progress()
    try:
        asset_id, response = issue(
            config, horizon, issuer_seed, distributor_seed, receiver_seeds, progress=progress)
    except nft_issuer.IssuanceError as exception:
        LOGGER.error("issuance failed after stage %s: %s", progress.stage, exception)
        return IssuanceResult(progress.stage, None, None, exception)
    LOGGER.info("issued %s", asset_id)
    return IssuanceResult(progress.stage, asset_id, response.get('hash'), None)
