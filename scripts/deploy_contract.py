"""
Smart Contract Deployment Script
Compiles and deploys the Project contract, then prints its address
"""

import os
import sys
from typing import Optional
from loguru import logger

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blockchain import ContractManager, WalletManager
from utils import DeployConfig, RPCManager, setup_logging

CONTRACT_NAME = "Project"


def build_contract_manager(config: DeployConfig) -> ContractManager:
    """Connect to the node and bind a contract manager to the deployer wallet"""
    w3 = RPCManager(config.rpc_url).connect()
    wallet_manager = WalletManager(w3, config.private_key)

    return ContractManager(
        w3,
        wallet_manager,
        artifacts_dir=config.artifacts_dir,
        compile_on_deploy=config.compile_on_deploy,
        compile_command=config.compile_command,
        deploy_timeout=config.deploy_timeout
    )


def deploy_contract(contract_manager: ContractManager, name: str = CONTRACT_NAME) -> str:
    """
    Deploy a contract and wait for it to be mined

    Args:
        contract_manager: Source of contract factories
        name: Contract name

    Returns:
        Deployed contract address
    """
    factory = contract_manager.get_contract_factory(name)
    contract = factory.deploy()

    contract.wait_for_deployment()
    address = contract.get_address()

    print(f"✅ Contract deployed to: {address}")
    return address


def main(contract_manager: Optional[ContractManager] = None) -> int:
    """
    Run the deployment

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    setup_logging()

    try:
        config = DeployConfig.from_env()
        if config.log_level != "INFO":
            setup_logging(config.log_level)

        if contract_manager is None:
            contract_manager = build_contract_manager(config)

        deploy_contract(contract_manager)
        return 0

    except Exception as e:
        logger.exception(f"Deployment failed: {e}")
        return 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
