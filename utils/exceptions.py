"""
Deployer Exceptions
Typed error taxonomy for the deployment pipeline
"""


class DeployerError(Exception):
    """Base exception for every deployment failure"""
    pass


class MissingSecretError(DeployerError, ValueError):
    """Raised when a required environment secret is not set"""
    pass


class InvalidSecretError(DeployerError, ValueError):
    """Raised when a secret is present but cannot be used (e.g. malformed key)"""
    pass


class RPCConnectionError(DeployerError, ConnectionError):
    """Raised when the RPC endpoint cannot be reached"""
    pass


class DeploymentTransactionError(DeployerError, RuntimeError):
    """Raised when the creation transaction cannot be submitted or confirmed"""
    pass


class DeploymentRevertedError(DeploymentTransactionError):
    """Raised when the creation transaction was mined with status 0"""
    pass


class ArtifactNotFoundError(DeployerError, FileNotFoundError):
    """Raised when the build artifact file does not exist"""
    pass


class InvalidArtifactError(DeployerError, ValueError):
    """Raised when the build artifact has no usable ABI or bytecode"""
    pass


class NetworkConfigNotFoundError(DeployerError, FileNotFoundError):
    """Raised when the network configuration file does not exist"""
    pass


class InvalidNetworkConfigError(DeployerError, ValueError):
    """Raised when the network configuration file is malformed"""
    pass


class NetworkNotFoundError(DeployerError, ValueError):
    """Raised when the requested network is not in the configuration"""
    pass


class ConfigWriteError(DeployerError, OSError):
    """Raised when the updated configuration cannot be written"""
    pass
