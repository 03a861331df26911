"""Assemble and sign the issuance transaction."""
import logging

import stellar_sdk

import nft_issuer

LOGGER = logging.getLogger('nft.issuer.transaction')
# Zero min and max time: the transaction never expires.
UNBOUNDED = (0, 0)


class AssemblyError(nft_issuer.IssuanceError):
    """Transaction envelope could not be assembled or signed."""


def assemble(issuer_address, sequence, operations, config):
    """
    Wrap operations into an unsigned envelope sourced by the issuer.
    The envelope uses sequence + 1, has no time limit, and pays the configured
    base fee for each operation.
    """
    if not isinstance(sequence, int) or isinstance(sequence, bool) or sequence < 0:
        raise AssemblyError("invalid sequence number for {}: {!r}".format(issuer_address, sequence))
    if not operations:
        raise AssemblyError('refusing to assemble a transaction without operations')
    source_account = stellar_sdk.Account(issuer_address, sequence)
    builder = stellar_sdk.TransactionBuilder(
        source_account=source_account, network_passphrase=config.network_passphrase, base_fee=config.base_fee)
    builder.add_time_bounds(*UNBOUNDED)
    for operation in operations:
        builder.append_operation(operation)
    try:
        envelope = builder.build()
    except ValueError as exception:
        raise AssemblyError("can't build transaction: {}".format(exception)) from exception
    LOGGER.info(
        "transaction assembled: source %s, sequence %s, fee %s",
        issuer_address, envelope.transaction.sequence, envelope.transaction.fee)
    return envelope


def sign(envelope, signers):
    """Sign envelope with every keypair of the signers mapping."""
    for address, keypair in signers.items():
        try:
            envelope.sign(keypair)
        except ValueError as exception:
            raise AssemblyError("{} can't sign: {}".format(address, exception)) from exception
        LOGGER.debug("signed by %s", address)
    LOGGER.info("transaction signed by %s accounts", len(signers))
    return envelope
