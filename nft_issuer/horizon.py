"""Horizon access: account lookup and transaction submission."""
import logging

import stellar_sdk
import stellar_sdk.exceptions

import nft_issuer

LOGGER = logging.getLogger('nft.issuer.horizon')
BAD_AUTH_CODES = ('tx_bad_auth', 'tx_bad_auth_extra', 'op_bad_auth')


class AccountNotFound(nft_issuer.IssuanceError):
    """Account does not exist on the ledger."""


class ServiceError(nft_issuer.IssuanceError):
    """Horizon could not be reached or failed to answer."""


class RejectedError(nft_issuer.IssuanceError):
    """Network refused the transaction."""

    def __init__(self, reason, result_codes=None):
        super().__init__(reason)
        self.reason = reason
        self.result_codes = result_codes or {}


class IncompleteSignerSet(RejectedError):
    """Transaction is missing signatures of some acting account."""


def rejection(exception):
    """Translate a Horizon error response into a RejectedError."""
    extras = exception.extras or {}
    result_codes = extras.get('result_codes') or {}
    codes = [result_codes.get('transaction')] + list(result_codes.get('operations') or [])
    reason = "{} ({})".format(
        exception.title or 'transaction rejected', ', '.join(code for code in codes if code) or exception.detail)
    if any(code in BAD_AUTH_CODES for code in codes):
        return IncompleteSignerSet(reason, result_codes)
    return RejectedError(reason, result_codes)


class Horizon:
    """Account and submission services of a single Horizon server."""

    def __init__(self, config, server=None):
        self.config = config
        self.server = server or stellar_sdk.Server(horizon_url=config.horizon_url)

    def get_sequence(self, address):
        """Get the current sequence number of an account."""
        LOGGER.info("fetching account %s from %s", address, self.config.horizon_url)
        try:
            account = self.server.load_account(address)
        except stellar_sdk.exceptions.NotFoundError as exception:
            raise AccountNotFound("account {} does not exist".format(address)) from exception
        except (stellar_sdk.exceptions.BaseHorizonError, stellar_sdk.exceptions.ConnectionError) as exception:
            raise ServiceError("can't load account {}: {}".format(address, exception)) from exception
        LOGGER.debug("account %s has sequence %s", address, account.sequence)
        return account.sequence

    def submit(self, envelope):
        """Submit a signed envelope. Any failure is final, nothing is retried."""
        LOGGER.debug("submitting %s", envelope.to_xdr())
        try:
            response = self.server.submit_transaction(envelope, skip_memo_required_check=True)
        except stellar_sdk.exceptions.BadRequestError as exception:
            rejected = rejection(exception)
            LOGGER.error("transaction rejected: %s", rejected.reason)
            raise rejected from exception
        except (stellar_sdk.exceptions.BaseHorizonError, stellar_sdk.exceptions.ConnectionError) as exception:
            raise ServiceError("can't submit transaction: {}".format(exception)) from exception
        LOGGER.info("transaction %s accepted", response.get('hash'))
        return response
