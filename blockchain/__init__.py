"""
Blockchain Interaction Package
Handles the RPC connection, deployer wallet and contract deployment
"""

from .connection import connect
from .contract_deployer import ContractDeployer, DeployedContract
from .wallet import DeployerWallet

__all__ = ['connect', 'ContractDeployer', 'DeployedContract', 'DeployerWallet']
