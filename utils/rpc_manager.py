"""
RPC Manager
Opens the web3 connection used for deployment
"""

from web3 import Web3
from loguru import logger

from blockchain.exceptions import ConnectionFailedError


class RPCManager:
    """
    Single-endpoint RPC connection
    """

    def __init__(self, rpc_url: str):
        """
        Initialize RPC Manager

        Args:
            rpc_url: HTTP JSON-RPC endpoint
        """
        self.rpc_url = rpc_url
        self.w3 = None

    def connect(self) -> Web3:
        """
        Connect to the endpoint, reusing an open connection

        Returns:
            Connected Web3 instance

        Raises:
            ConnectionFailedError: endpoint is unreachable
        """
        if self.w3 is not None:
            return self.w3

        w3 = Web3(Web3.HTTPProvider(self.rpc_url))

        if not w3.is_connected():
            raise ConnectionFailedError(f"Failed to connect to {self.rpc_url}")

        logger.info(f"Connected to {self.rpc_url} (chain id {w3.eth.chain_id})")
        self.w3 = w3
        return w3
