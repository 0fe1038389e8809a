"""
Contract Factory
Submits contract creation transactions and tracks their confirmation
"""

from typing import Optional
from web3 import Web3
from loguru import logger

from .exceptions import DeploymentFailedError, DeploymentNotConfirmedError


class DeployedContract:
    """
    Handle to a contract creation transaction

    The address becomes available once wait_for_deployment() returns.
    """

    def __init__(self, w3: Web3, artifact, tx_hash, timeout: Optional[float] = None):
        self.w3 = w3
        self.artifact = artifact
        self.tx_hash = tx_hash
        self.timeout = timeout
        self.receipt = None
        self._address = None

    @property
    def deployed(self) -> bool:
        return self._address is not None

    def wait_for_deployment(self) -> 'DeployedContract':
        """
        Block until the creation transaction is mined

        Returns:
            self, with receipt and address populated

        Raises:
            DeploymentFailedError: transaction reverted
        """
        if self.deployed:
            return self

        logger.info("Waiting for confirmation...")

        if self.timeout is None:
            receipt = self.w3.eth.wait_for_transaction_receipt(self.tx_hash)
        else:
            receipt = self.w3.eth.wait_for_transaction_receipt(self.tx_hash, timeout=self.timeout)

        if receipt['status'] != 1:
            raise DeploymentFailedError(
                f"Deployment of {self.artifact.contract_name} reverted "
                f"(tx {Web3.to_hex(self.tx_hash)})"
            )

        self.receipt = receipt
        self._address = Web3.to_checksum_address(receipt['contractAddress'])

        logger.success(f"{self.artifact.contract_name} confirmed in block {receipt['blockNumber']}")
        logger.info(f"Gas used: {receipt['gasUsed']}")
        return self

    def get_address(self) -> str:
        """Deployed contract address (only after confirmation)"""
        if not self.deployed:
            raise DeploymentNotConfirmedError(
                f"{self.artifact.contract_name} is not confirmed yet, call wait_for_deployment() first"
            )
        return self._address

    @property
    def contract(self):
        """web3 contract instance at the deployed address"""
        return self.w3.eth.contract(address=self.get_address(), abi=self.artifact.abi)


class ContractFactory:
    """
    Deploys one compiled contract from the deployer wallet
    """

    def __init__(self, w3: Web3, artifact, wallet_manager, timeout: Optional[float] = None):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: ContractArtifact to deploy
            wallet_manager: Wallet manager for the deployer account
            timeout: Receipt wait for deployments (None keeps web3's default)
        """
        self.w3 = w3
        self.artifact = artifact
        self.wallet_manager = wallet_manager
        self.timeout = timeout
        self.contract_class = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    def deploy(self, *args) -> DeployedContract:
        """
        Submit the creation transaction

        Args:
            *args: Constructor arguments

        Returns:
            DeployedContract handle (not yet confirmed)
        """
        sender = self.wallet_manager.address
        constructor = self.contract_class.constructor(*args)

        logger.info(f"Deploying {self.artifact.contract_name} from {sender}")

        if self.wallet_manager.signs_locally:
            transaction = constructor.build_transaction({
                'from': sender,
                'nonce': self.w3.eth.get_transaction_count(sender, 'pending'),
                'chainId': self.w3.eth.chain_id
            })
            signed_tx = self.wallet_manager.sign_transaction(transaction)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = constructor.transact({'from': sender})

        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")

        return DeployedContract(self.w3, self.artifact, tx_hash, timeout=self.timeout)
