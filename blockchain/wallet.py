"""
Deployer Wallet
Signing identity derived from the deployer's private key
"""

from typing import Dict

from eth_account import Account
from eth_account.datastructures import SignedTransaction
from loguru import logger

from utils.exceptions import InvalidSecretError


class DeployerWallet:
    """
    Wraps the deployer account. The key only lives inside the
    eth_account LocalAccount and is never logged.
    """

    def __init__(self, private_key: str):
        """
        Initialize wallet

        Args:
            private_key: Hex-encoded secp256k1 private key

        Raises:
            InvalidSecretError: If the key cannot be parsed
        """
        try:
            self.account = Account.from_key(private_key)
        except Exception:
            # eth_account's message can echo key material
            raise InvalidSecretError("PRIVATE_KEY is not a valid private key") from None

        self.address = self.account.address

        logger.info(f"Deployer wallet: {self.address}")

    def sign_transaction(self, transaction: Dict) -> SignedTransaction:
        """
        Sign a transaction with the deployer account

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise
