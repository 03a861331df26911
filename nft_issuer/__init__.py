"""Single-transaction NFT issuer for the Stellar network."""


class IssuanceError(Exception):
    """Issuance run failed."""
