"""Shared pytest fixtures for deployer tests."""

import json
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

# Hardhat default account #0, never funded outside local nodes
TEST_PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'
TEST_ADDRESS = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'

DEPLOYED_ADDRESS = '0x5FbDB2315678afecb367f032d93F642f64180aa3'
TX_HASH = bytes.fromhex('ab' * 32)

SAMPLE_ABI = [
    {
        "inputs": [],
        "name": "retrieve",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    }
]
SAMPLE_BYTECODE = '0x6080604052348015600f57600080fd5b50'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without PRIVATE_KEY; restore the real value afterwards."""
    monkeypatch.setenv('PRIVATE_KEY', 'placeholder')
    monkeypatch.delenv('PRIVATE_KEY')


@pytest.fixture
def private_key(monkeypatch) -> str:
    """Set a valid PRIVATE_KEY in the environment."""
    monkeypatch.setenv('PRIVATE_KEY', TEST_PRIVATE_KEY)
    return TEST_PRIVATE_KEY


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    """Path of a .env file that does not exist."""
    return tmp_path / '.env'


@pytest.fixture
def sample_artifact() -> Dict[str, Any]:
    return {'abi': SAMPLE_ABI, 'bytecode': SAMPLE_BYTECODE}


@pytest.fixture
def artifact_path(tmp_path: Path, sample_artifact: Dict[str, Any]) -> Path:
    """Write the sample build artifact to disk."""
    path = tmp_path / 'metadata.json'
    with open(path, 'w') as f:
        json.dump(sample_artifact, f)
    return path


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    return {
        'networks': {
            'sonic': {
                'url': 'https://rpc.soniclabs.com',
                'chainId': 146
            }
        }
    }


@pytest.fixture
def config_path(tmp_path: Path, sample_config: Dict[str, Any]) -> Path:
    """Write the sample network config to disk."""
    path = tmp_path / 'network_config.json'
    with open(path, 'w') as f:
        json.dump(sample_config, f, indent=4)
    return path


@pytest.fixture
def make_w3():
    """
    Factory for a mocked Web3 instance

    build_transaction fills legacy gas fields, send_raw_transaction
    returns TX_HASH and the receipt reports `contract_address`.
    """
    def _make(contract_address: str = DEPLOYED_ADDRESS, status: int = 1, send_error: Exception = None):
        w3 = MagicMock()
        w3.is_connected.return_value = True
        w3.eth.get_transaction_count.return_value = 0

        constructor = w3.eth.contract.return_value.constructor.return_value
        constructor.build_transaction.side_effect = lambda tx: {
            **tx,
            'gas': 500000,
            'gasPrice': 1000000000,
            'value': 0,
            'data': SAMPLE_BYTECODE
        }

        if send_error is not None:
            w3.eth.send_raw_transaction.side_effect = send_error
        else:
            w3.eth.send_raw_transaction.return_value = TX_HASH

        w3.eth.wait_for_transaction_receipt.return_value = {
            'status': status,
            'contractAddress': contract_address,
            'blockNumber': 1234,
            'gasUsed': 456789,
            'transactionHash': TX_HASH
        }
        return w3

    return _make
