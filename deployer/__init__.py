"""
Deployer Package
Deploys the compiled contract and records its address
"""

from .deployer import Deployer, DeploymentResult

__all__ = ['Deployer', 'DeploymentResult']
