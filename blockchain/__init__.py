"""
Blockchain Interaction Package
Handles artifact lookup, contract factories and the deployer wallet
"""

from .contract_manager import ContractManager, ContractArtifact
from .contract_factory import ContractFactory, DeployedContract
from .wallet_manager import WalletManager

__all__ = [
    'ContractManager',
    'ContractArtifact',
    'ContractFactory',
    'DeployedContract',
    'WalletManager'
]
