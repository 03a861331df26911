"""Build the ordered operations that issue an NFT in one transaction."""
import collections
import logging

import stellar_sdk

import nft_issuer

LOGGER = logging.getLogger('nft.issuer.operations')
# One stroop, the smallest amount the ledger can represent.
MINIMAL_AMOUNT = '0.0000001'
ASSET_ID_SEPARATOR = ':'


class InvalidAsset(nft_issuer.IssuanceError):
    """Asset code, issuer or metadata can not be used on the ledger."""


def asset_descriptor(code, issuer_address):
    """Get the asset issued by issuer_address under code."""
    try:
        return stellar_sdk.Asset(code, issuer_address)
    except ValueError as exception:
        raise InvalidAsset("can't describe asset {}: {}".format(code, exception)) from exception


def asset_id(asset):
    """Canonical 'code:issuer' form of an asset."""
    return "{}{}{}".format(asset.code, ASSET_ID_SEPARATOR, asset.issuer)


def parse_asset_id(text):
    """Split a 'code:issuer' string back into (code, issuer)."""
    code, separator, issuer = text.partition(ASSET_ID_SEPARATOR)
    assert separator and code and issuer, "{} is not in code:issuer form".format(text)
    return code, issuer


def build_operations(asset, issuer, distributor, receivers, data_name, data_value):
    """
    Get the issuance operations, in order:
    distributor trust, minimal payment from issuer to distributor, issuer data
    entry, zeroing of the issuer master weight, then a trust operation for
    each extra receiver.
    The distributor must trust the asset before it can be paid, and nothing
    sourced by the issuer may follow the master weight change.
    """
    issuer_address = issuer.public_key
    distributor_address = distributor.public_key
    try:
        operations = [
            stellar_sdk.ChangeTrust(asset=asset, source=distributor_address),
            stellar_sdk.Payment(
                destination=distributor_address, asset=asset, amount=MINIMAL_AMOUNT, source=issuer_address),
            stellar_sdk.ManageData(data_name=data_name, data_value=data_value, source=issuer_address),
            stellar_sdk.SetOptions(master_weight=0, source=issuer_address)]
        operations.extend(
            stellar_sdk.ChangeTrust(asset=asset, source=receiver.public_key) for receiver in receivers)
    except ValueError as exception:
        raise InvalidAsset("can't build issuance operations: {}".format(exception)) from exception
    LOGGER.info("%s operations built for %s", len(operations), asset_id(asset))
    return operations


def operation_sources(operations, default_source=None):
    """Distinct accounts acting in operations; default_source stands in for unsourced ones."""
    sources = set()
    for operation in operations:
        if operation.source is None:
            assert default_source is not None, "operation without source and no default source"
            sources.add(default_source)
        else:
            sources.add(operation.source.account_id)
    return sources


def signer_set(issuer, distributor, receivers):
    """Map every acting account to its keypair: issuer, distributor, then receivers in order."""
    signers = collections.OrderedDict()
    for keypair in [issuer, distributor] + list(receivers):
        signers.setdefault(keypair.public_key, keypair)
    return signers
