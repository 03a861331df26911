"""Logging setup for the issuer."""
import logging
import os
import sys

FORMAT = '%(asctime)s %(levelname).3s %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup(level=None):
    """Send log records to stderr, keeping stdout for the issued asset id."""
    level = level or os.environ.get('NFT_LOG_LEVEL', 'INFO')
    root = logging.getLogger('nft')
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(FORMAT, DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    return root
