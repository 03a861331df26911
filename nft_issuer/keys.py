"""Resolve secret seeds into signing keypairs."""
import logging

import stellar_sdk

import nft_issuer

LOGGER = logging.getLogger('nft.issuer.keys')
SEED_SEPARATOR = ','


class InvalidSeedFormat(nft_issuer.IssuanceError):
    """Seed is not a valid ed25519 secret seed."""


class OverlappingIdentities(nft_issuer.IssuanceError):
    """The same account was supplied for more than one role."""


def resolve(seed):
    """Get a full (signing) keypair from a secret seed."""
    try:
        keypair = stellar_sdk.Keypair.from_secret(seed)
    except (ValueError, TypeError, AttributeError) as exception:
        # Never echo the seed itself.
        raise InvalidSeedFormat("invalid secret seed: {}".format(type(exception).__name__)) from exception
    LOGGER.debug("resolved seed of %s", keypair.public_key)
    return keypair


def split_seeds(seeds_string):
    """Split a comma separated list of seeds, dropping empty entries."""
    return [seed.strip() for seed in seeds_string.split(SEED_SEPARATOR) if seed.strip()]


def build_receivers(seeds):
    """Resolve receivers seeds in the order given. Fails on the first invalid seed."""
    receivers = []
    for index, seed in enumerate(seeds):
        try:
            receivers.append(resolve(seed))
        except InvalidSeedFormat as exception:
            raise InvalidSeedFormat("receiver #{}: {}".format(index + 1, exception)) from exception
    LOGGER.info("%s extra receivers resolved", len(receivers))
    return receivers


def check_overlap(issuer, distributor, receivers):
    """
    Refuse an account playing more than one role.
    A receiver equal to the issuer would source a trust operation after the
    issuer's master weight is zeroed, so it is rejected along with any other
    repeated account.
    """
    seen = {issuer.public_key: 'issuer'}
    roles = [('distributor', distributor)] + [
        ("receiver #{}".format(index + 1), receiver) for index, receiver in enumerate(receivers)]
    for role, keypair in roles:
        if keypair.public_key in seen:
            raise OverlappingIdentities("{} {} is already used as {}".format(
                role, keypair.public_key, seen[keypair.public_key]))
        seen[keypair.public_key] = role
