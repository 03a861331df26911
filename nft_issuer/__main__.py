"""Issue an NFT from the command line and print it as <code>:<issuer>."""
import argparse
import sys

from nft_issuer import config as nft_config
from nft_issuer import horizon as nft_horizon
from nft_issuer import issue
from nft_issuer import keys
from nft_issuer import logger

LOGGER = logger.logging.getLogger('nft.issuer')


def parse_args(argv=None):
    """Parse command line; missing or empty seeds are a usage error."""
    parser = argparse.ArgumentParser(
        prog='nft-issuer', description=__doc__, formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument(
        '-i', dest='issuer_seed', required=True,
        help='The asset issuer seed. i.e: SDR4C2CKNCVK4DWMTNI2IXFJ6BE3A6J3WVNCGR6Q3SCMJDTSVHMJGC6U')
    parser.add_argument(
        '-d', dest='distributor_seed', required=True,
        help='The asset distributor seed. i.e: SBUW3DVYLKLY5ZUJD5PL2ZHOFWJSVWGJA47F6FLO66UUFZLUUA2JVU5U')
    parser.add_argument(
        '-r', dest='receiver_seeds', required=True,
        help='Other possible receivers seeds of the asset. Comma separated list of seeds. i.e: SBUW...,SBUW3..')
    parser.add_argument('--horizon-url', help="Horizon server (default: $NFT_HORIZON_URL or testnet)")
    parser.add_argument('--network-passphrase', help='Network passphrase (default: $NFT_NETWORK_PASSPHRASE or testnet)')
    parser.add_argument('--asset-code', help='Asset code (default: $NFT_ASSET_CODE or EigerNFT)')
    args = parser.parse_args(argv)
    for name in ('issuer_seed', 'distributor_seed', 'receiver_seeds'):
        if not getattr(args, name):
            parser.error("params needed: {} is empty".format(name))
    try:
        args.config = nft_config.from_env(
            horizon_url=args.horizon_url, network_passphrase=args.network_passphrase, asset_code=args.asset_code)
    except (AssertionError, ValueError) as exception:
        parser.error("bad configuration: {}".format(exception))
    return args


def main(argv=None, horizon=None, stdout=None):
    """Run the issuer; returns the process exit status."""
    logger.setup()
    args = parse_args(argv)
    horizon = horizon or nft_horizon.Horizon(args.config)
    result = issue.run(
        args.config, horizon, args.issuer_seed, args.distributor_seed, keys.split_seeds(args.receiver_seeds))
    if result.error is not None:
        return 1
    LOGGER.info("transaction hash: %s", result.transaction_hash)
    # Feed to: soroban lab token id --asset <code>:<issuer> --network testnet
    print(result.asset_id, file=stdout or sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
