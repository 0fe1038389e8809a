"""
Contract Manager
Locates compiled Hardhat artifacts and hands out contract factories
"""

import os
import json
import glob
import subprocess
from typing import Dict, List, Optional
from web3 import Web3
from loguru import logger

from .contract_factory import ContractFactory
from .exceptions import (
    AmbiguousArtifactError,
    ArtifactNotFoundError,
    CompilationError,
    InvalidArtifactError
)


class ContractArtifact:
    """
    Compiled contract: ABI plus creation bytecode
    """

    def __init__(self, contract_name: str, abi: List[Dict], bytecode: str, source_name: str = None, path: str = None):
        self.contract_name = contract_name
        self.abi = abi
        self.bytecode = bytecode
        self.source_name = source_name
        self.path = path

    @classmethod
    def from_file(cls, path: str) -> 'ContractArtifact':
        """
        Load and validate a Hardhat artifact JSON

        Args:
            path: Artifact file path

        Returns:
            ContractArtifact
        """
        try:
            with open(path, 'r') as f:
                contract_json = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArtifactError(f"Artifact {path} is not valid JSON: {e}") from e

        if 'abi' not in contract_json or 'bytecode' not in contract_json:
            raise InvalidArtifactError(f"Artifact {path} has no abi/bytecode")

        name = contract_json.get('contractName') or os.path.splitext(os.path.basename(path))[0]
        bytecode = contract_json['bytecode'] or ''

        if bytecode in ('', '0x'):
            # interfaces and abstract contracts compile to empty bytecode
            raise InvalidArtifactError(f"{name} has no deployable bytecode (abstract or interface?)")

        return cls(
            contract_name=name,
            abi=contract_json['abi'],
            bytecode=bytecode,
            source_name=contract_json.get('sourceName'),
            path=path
        )


class ContractManager:
    """
    Resolves contract names to artifacts and contract factories
    """

    def __init__(
        self,
        w3: Web3,
        wallet_manager,
        artifacts_dir: str = 'artifacts',
        compile_on_deploy: bool = True,
        compile_command: Optional[List[str]] = None,
        deploy_timeout: Optional[float] = None
    ):
        """
        Initialize Contract Manager

        Args:
            w3: Web3 instance
            wallet_manager: Wallet manager holding the deployer account
            artifacts_dir: Root of the Hardhat artifacts tree
            compile_on_deploy: Compile before looking artifacts up
            compile_command: Compile command argv
            deploy_timeout: Receipt wait passed to deployed contracts
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.artifacts_dir = artifacts_dir
        self.compile_on_deploy = compile_on_deploy
        self.compile_command = compile_command or ['npx', 'hardhat', 'compile']
        self.deploy_timeout = deploy_timeout
        self._compiled = False

    def compile(self):
        """
        Run the compile command once per manager

        Raises:
            CompilationError: command missing or exited non-zero
        """
        if self._compiled:
            return

        logger.info(f"Compiling contracts: {' '.join(self.compile_command)}")

        try:
            result = subprocess.run(self.compile_command)
        except FileNotFoundError as e:
            raise CompilationError(f"Compile command not found: {self.compile_command[0]}") from e

        if result.returncode != 0:
            raise CompilationError(
                f"'{' '.join(self.compile_command)}' exited with code {result.returncode}"
            )

        self._compiled = True

    def find_artifact(self, name: str) -> str:
        """
        Find the artifact file for a contract

        Args:
            name: Contract name ("Project") or fully qualified
                name ("contracts/Project.sol:Project")

        Returns:
            Artifact file path
        """
        if ':' in name:
            source_name, contract_name = name.rsplit(':', 1)
            path = os.path.join(self.artifacts_dir, source_name, f"{contract_name}.json")
            if not os.path.isfile(path):
                raise ArtifactNotFoundError(f"Artifact for contract \"{name}\" not found")
            return path

        pattern = os.path.join(self.artifacts_dir, 'contracts', '**', f"{name}.json")
        matches = sorted(glob.glob(pattern, recursive=True))

        if not matches:
            raise ArtifactNotFoundError(
                f"Artifact for contract \"{name}\" not found under {self.artifacts_dir}"
            )

        if len(matches) > 1:
            candidates = ', '.join(
                os.path.relpath(os.path.dirname(p), self.artifacts_dir) + ':' + name
                for p in matches
            )
            raise AmbiguousArtifactError(
                f"Multiple artifacts for contract \"{name}\", use a fully qualified name: {candidates}"
            )

        return matches[0]

    def load_artifact(self, name: str) -> ContractArtifact:
        """Load the artifact of a contract by name"""
        path = self.find_artifact(name)
        logger.debug(f"Loading artifact {path}")
        return ContractArtifact.from_file(path)

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Get a factory for deploying a compiled contract

        Args:
            name: Contract name

        Returns:
            ContractFactory bound to the deployer wallet
        """
        if self.compile_on_deploy:
            self.compile()

        artifact = self.load_artifact(name)

        return ContractFactory(
            self.w3,
            artifact,
            self.wallet_manager,
            timeout=self.deploy_timeout
        )
