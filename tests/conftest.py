"""
Shared test fixtures
"""

import json
import os

import pytest
from loguru import logger


DEPLOY_ENV_VARS = [
    'RPC_URL',
    'DEPLOYER_PRIVATE_KEY',
    'ARTIFACTS_DIR',
    'COMPILE_ON_DEPLOY',
    'COMPILE_COMMAND',
    'DEPLOY_TIMEOUT',
    'LOG_LEVEL'
]

PROJECT_ABI = [
    {
        "inputs": [],
        "name": "owner",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks bound to captured streams after each test"""
    yield
    logger.remove()


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without deployer settings"""
    for var in DEPLOY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def write_artifact(tmp_path):
    """Write a Hardhat-style artifact under tmp_path/artifacts"""
    def _write(source_name, contract_name, bytecode="0x6080604052", abi=None):
        directory = tmp_path / "artifacts" / source_name
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{contract_name}.json"
        path.write_text(json.dumps({
            "_format": "hh-sol-artifact-1",
            "contractName": contract_name,
            "sourceName": source_name,
            "abi": PROJECT_ABI if abi is None else abi,
            "bytecode": bytecode,
            "deployedBytecode": bytecode
        }))
        # Hardhat writes a debug file next to every artifact
        (directory / f"{contract_name}.dbg.json").write_text(json.dumps({
            "_format": "hh-sol-dbg-1",
            "buildInfo": "../../build-info/abc.json"
        }))
        return str(path)

    return _write


@pytest.fixture
def artifacts_dir(tmp_path):
    return os.path.join(str(tmp_path), "artifacts")
