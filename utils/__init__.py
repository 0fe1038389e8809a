"""
Utilities Package
Configuration, logging and RPC connection helpers
"""

from .config import DeployConfig
from .logger import setup_logging
from .rpc_manager import RPCManager

__all__ = [
    'DeployConfig',
    'setup_logging',
    'RPCManager'
]
