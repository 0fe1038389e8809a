"""
Deployment Configuration
Reads deployer settings from .env and the process environment
"""

import os
import shlex
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_RPC_URL = 'http://127.0.0.1:8545'
DEFAULT_ARTIFACTS_DIR = 'artifacts'
DEFAULT_COMPILE_COMMAND = 'npx hardhat compile'


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_timeout(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return None

    timeout = float(value)
    if timeout <= 0:
        raise ValueError(f"{name} must be a positive number of seconds, got {value!r}")
    return timeout


class DeployConfig:
    """
    Settings for a single deployment run
    """

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        private_key: Optional[str] = None,
        artifacts_dir: str = DEFAULT_ARTIFACTS_DIR,
        compile_on_deploy: bool = True,
        compile_command: Optional[List[str]] = None,
        deploy_timeout: Optional[float] = None,
        log_level: str = 'INFO'
    ):
        """
        Initialize deployment configuration

        Args:
            rpc_url: JSON-RPC endpoint of the target node
            private_key: Local signing key (None uses the node's first account)
            artifacts_dir: Root of the compiled artifacts tree
            compile_on_deploy: Run the compile command before artifact lookup
            compile_command: Compile command as an argv list
            deploy_timeout: Receipt wait in seconds (None keeps web3's default)
            log_level: Minimum level for the stderr log sink
        """
        self.rpc_url = rpc_url
        self.private_key = private_key
        self.artifacts_dir = artifacts_dir
        self.compile_on_deploy = compile_on_deploy
        self.compile_command = compile_command or shlex.split(DEFAULT_COMPILE_COMMAND)
        self.deploy_timeout = deploy_timeout
        self.log_level = log_level

    @classmethod
    def from_env(cls) -> 'DeployConfig':
        """Build configuration from environment variables"""
        return cls(
            rpc_url=os.getenv('RPC_URL') or DEFAULT_RPC_URL,
            private_key=os.getenv('DEPLOYER_PRIVATE_KEY') or None,
            artifacts_dir=os.getenv('ARTIFACTS_DIR') or DEFAULT_ARTIFACTS_DIR,
            compile_on_deploy=_env_flag('COMPILE_ON_DEPLOY', True),
            compile_command=shlex.split(os.getenv('COMPILE_COMMAND') or DEFAULT_COMPILE_COMMAND),
            deploy_timeout=_env_timeout('DEPLOY_TIMEOUT'),
            log_level=(os.getenv('LOG_LEVEL') or 'INFO').upper()
        )
