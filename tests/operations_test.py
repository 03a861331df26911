"""Tests for operations module"""
import decimal
import unittest

import stellar_sdk

from nft_issuer import keys
from nft_issuer import operations
import tests


def source_of(operation):
    """Account acting in operation."""
    return operation.source.account_id


class OperationsTest(unittest.TestCase):
    """Test the issuance operations sequence."""

    def setUp(self):
        self.issuer, self.distributor = [keys.resolve(seed) for seed in tests.new_seeds(2)]
        self.asset = operations.asset_descriptor(tests.TEST_CONFIG.asset_code, self.issuer.public_key)

    def build(self, receivers):
        """Build operations for the test accounts."""
        return operations.build_operations(
            self.asset, self.issuer, self.distributor, receivers,
            tests.TEST_CONFIG.data_name, tests.TEST_CONFIG.data_value)

    def test_no_receivers(self):
        """Without extra receivers there are exactly four operations and two signers"""
        ops = self.build([])
        self.assertEqual(
            [type(operation) for operation in ops],
            [stellar_sdk.ChangeTrust, stellar_sdk.Payment, stellar_sdk.ManageData, stellar_sdk.SetOptions])
        self.assertEqual(
            [source_of(operation) for operation in ops],
            [self.distributor.public_key] + [self.issuer.public_key] * 3)
        signers = operations.signer_set(self.issuer, self.distributor, [])
        self.assertEqual(len(signers), 2)

    def test_operations_content(self):
        """Each fixed operation carries the expected values"""
        change_trust, payment, manage_data, set_options = self.build([])
        self.assertEqual(change_trust.asset, self.asset)
        self.assertEqual(payment.destination.account_id, self.distributor.public_key)
        self.assertEqual(payment.asset, self.asset)
        self.assertEqual(decimal.Decimal(str(payment.amount)), decimal.Decimal(operations.MINIMAL_AMOUNT))
        self.assertEqual(manage_data.data_name, 'nftsource')
        self.assertEqual(manage_data.data_value, b'https://www.eiger.co')
        self.assertEqual(set_options.master_weight, 0)

    def test_two_receivers(self):
        """Two receivers add two trust operations, in the order given"""
        receivers = keys.build_receivers(tests.new_seeds(2))
        ops = self.build(receivers)
        self.assertEqual(len(ops), 6)
        self.assertEqual(
            [source_of(operation) for operation in ops[4:]], [receiver.public_key for receiver in receivers])
        for operation in ops[4:]:
            self.assertIsInstance(operation, stellar_sdk.ChangeTrust)
        signers = operations.signer_set(self.issuer, self.distributor, receivers)
        self.assertEqual(
            list(signers),
            [self.issuer.public_key, self.distributor.public_key] + [receiver.public_key for receiver in receivers])

    def test_invariants(self):
        """Ordering and signer completeness hold for any number of receivers"""
        for receivers_number in range(5):
            receivers = keys.build_receivers(tests.new_seeds(receivers_number))
            ops = self.build(receivers)
            self.assertEqual(len(ops), 4 + receivers_number)

            trust_index = next(
                index for index, operation in enumerate(ops)
                if isinstance(operation, stellar_sdk.ChangeTrust)
                and source_of(operation) == self.distributor.public_key)
            payment_index = next(
                index for index, operation in enumerate(ops) if isinstance(operation, stellar_sdk.Payment))
            self.assertLess(trust_index, payment_index, 'distributor trust does not precede payment')

            issuer_operations = [
                operation for operation in ops if source_of(operation) == self.issuer.public_key]
            self.assertIsInstance(issuer_operations[-1], stellar_sdk.SetOptions)
            self.assertEqual(issuer_operations[-1].master_weight, 0)

            signers = operations.signer_set(self.issuer, self.distributor, receivers)
            self.assertEqual(
                set(signers), operations.operation_sources(ops) | {self.issuer.public_key})

    def test_unsourced_operation(self):
        """Operations without source are attributed to the default source"""
        ops = [stellar_sdk.SetOptions(master_weight=0)]
        self.assertEqual(
            operations.operation_sources(ops, self.issuer.public_key), {self.issuer.public_key})

    def test_invalid_metadata(self):
        """Data entry names over the ledger limit are refused"""
        with self.assertRaises(operations.InvalidAsset):
            operations.build_operations(
                self.asset, self.issuer, self.distributor, [], 'x' * 65, tests.TEST_CONFIG.data_value)


class AssetTest(unittest.TestCase):
    """Test asset descriptor and its textual form."""

    def test_asset_id_round_trip(self):
        """code:issuer splits back into the code and issuer used"""
        issuer = keys.resolve(tests.new_seeds(1)[0])
        asset = operations.asset_descriptor('EigerNFT', issuer.public_key)
        text = operations.asset_id(asset)
        self.assertEqual(text, "EigerNFT:{}".format(issuer.public_key))
        self.assertEqual(operations.parse_asset_id(text), ('EigerNFT', issuer.public_key))
        self.assertEqual(text.split(':'), ['EigerNFT', issuer.public_key])

    def test_parse_malformed(self):
        """Strings without both parts are refused"""
        for text in ['EigerNFT', ':GABC', 'EigerNFT:']:
            with self.assertRaises(AssertionError):
                operations.parse_asset_id(text)

    def test_invalid_code(self):
        """Asset codes must be 1 to 12 alphanumerics"""
        issuer = keys.resolve(tests.new_seeds(1)[0])
        for code in ['', 'ThirteenChars', 'bad-code']:
            with self.assertRaises(operations.InvalidAsset):
                operations.asset_descriptor(code, issuer.public_key)


if __name__ == '__main__':
    unittest.main()
