"""
Wallet Manager
Selects the account that signs the deployment
"""

from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger

from .exceptions import SignerUnavailableError


class WalletManager:
    """
    Deployer account holder

    With a private key the account signs locally. Without one, the first
    unlocked account of the node is used and the node signs.
    """

    def __init__(self, w3: Web3, private_key: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            w3: Web3 instance
            private_key: Deployer private key (optional)
        """
        self.w3 = w3

        if private_key:
            self.account = Account.from_key(private_key)
            self.address = self.account.address
        else:
            self.account = None
            accounts = w3.eth.accounts
            if not accounts:
                raise SignerUnavailableError(
                    "DEPLOYER_PRIVATE_KEY not set and the node exposes no unlocked accounts"
                )
            self.address = Web3.to_checksum_address(accounts[0])

        logger.info(f"Deployer wallet: {self.address}")

    @property
    def signs_locally(self) -> bool:
        return self.account is not None

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the local key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if self.account is None:
            raise SignerUnavailableError("No local key to sign with")

        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise
