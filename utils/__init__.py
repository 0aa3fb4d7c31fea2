"""
Utilities Package
Environment secrets, build artifacts, network config and error types
"""

from .artifact import DeploymentArtifact, load_artifact
from .environment import REQUIRED_ENV_VARS, Secrets, load_secrets
from .network_config import NetworkConfig, NetworkEntry, load_network_config, save_network_config
from .exceptions import DeployerError

__all__ = [
    'DeploymentArtifact',
    'load_artifact',
    'REQUIRED_ENV_VARS',
    'Secrets',
    'load_secrets',
    'NetworkConfig',
    'NetworkEntry',
    'load_network_config',
    'save_network_config',
    'DeployerError'
]
