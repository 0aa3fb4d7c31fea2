"""
Deployer
Runs one deployment end to end and records the address in the network config
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from blockchain.connection import connect
from blockchain.contract_deployer import ContractDeployer
from blockchain.wallet import DeployerWallet
from utils.artifact import load_artifact
from utils.environment import load_secrets
from utils.exceptions import DeployerError
from utils.network_config import load_network_config, save_network_config

DEFAULT_NETWORK = 'sonic'


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of a deployment run. Exactly one of `address` / `error` is set."""

    network: str
    address: Optional[str] = None
    transaction_hash: Optional[str] = None
    error: Optional[DeployerError] = None

    def __post_init__(self):
        if (self.address is None) == (self.error is None):
            raise ValueError("DeploymentResult needs exactly one of address or error")

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def succeeded(cls, network: str, address: str, transaction_hash: str) -> 'DeploymentResult':
        return cls(network=network, address=address, transaction_hash=transaction_hash)

    @classmethod
    def failed(cls, network: str, error: DeployerError) -> 'DeploymentResult':
        return cls(network=network, error=error)


class Deployer:
    """
    Deploys the build artifact to one configured network
    """

    def __init__(
        self,
        artifact_path: Union[Path, str],
        config_path: Union[Path, str],
        network: str = DEFAULT_NETWORK,
        env_file: Optional[Union[Path, str]] = None,
        receipt_timeout: Optional[float] = None
    ):
        """
        Initialize Deployer

        Args:
            artifact_path: Build artifact JSON ({abi, bytecode})
            config_path: Network config JSON, rewritten on success
            network: Network entry to deploy to
            env_file: .env file holding PRIVATE_KEY
            receipt_timeout: Seconds to wait for the receipt (None = wait forever)
        """
        self.artifact_path = Path(artifact_path)
        self.config_path = Path(config_path)
        self.network = network
        self.env_file = env_file
        self.receipt_timeout = receipt_timeout

    async def deploy(self) -> DeploymentResult:
        """
        Deploy and persist the new address

        Secrets and local files are validated before any connection is
        opened. The config file is only written after the receipt confirms
        the deployment.

        Returns:
            DeploymentResult; deployment failures are returned, not raised
        """
        try:
            secrets = load_secrets(self.env_file)
            wallet = DeployerWallet(secrets.private_key)

            config = load_network_config(self.config_path)
            entry = config.network(self.network)
            artifact = load_artifact(self.artifact_path)

            logger.info(f"Deploying {self.artifact_path.name} to {self.network} ({entry.url}, chain {entry.chain_id})")

            w3 = connect(entry.url)
            contract_deployer = ContractDeployer(
                w3,
                wallet,
                chain_id=entry.chain_id,
                receipt_timeout=self.receipt_timeout
            )

            deployed = await contract_deployer.deploy(artifact)

            save_network_config(config.with_deployment(self.network, deployed.address), self.config_path)

        except DeployerError as e:
            return DeploymentResult.failed(self.network, e)

        return DeploymentResult.succeeded(
            self.network,
            address=deployed.address,
            transaction_hash=deployed.transaction_hash
        )
