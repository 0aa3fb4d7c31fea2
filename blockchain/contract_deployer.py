"""
Contract Deployer
Builds, signs and submits the contract-creation transaction, then waits for it
"""

from dataclasses import dataclass
from typing import Dict, Optional

from web3 import Web3
from web3.exceptions import Web3Exception
from loguru import logger

from utils.artifact import DeploymentArtifact
from utils.exceptions import DeploymentRevertedError, DeploymentTransactionError, InvalidArtifactError
from .wallet import DeployerWallet

# web3 raises ValueError for JSON-RPC errors and requests raises OSError
# subclasses for transport failures
RPC_ERRORS = (Web3Exception, ValueError, OSError)

# web3 validates the ABI locally; a nameless entry surfaces as KeyError and a
# constructor with inputs as TypeError
ABI_ERRORS = (Web3Exception, TypeError, KeyError, ValueError)


@dataclass(frozen=True)
class DeployedContract:
    """Confirmed deployment"""

    address: str
    transaction_hash: str
    block_number: Optional[int] = None
    gas_used: Optional[int] = None


class ContractDeployer:
    """
    Deploys one artifact from the deployer wallet
    """

    def __init__(
        self,
        w3: Web3,
        wallet: DeployerWallet,
        chain_id: int,
        receipt_timeout: Optional[float] = None
    ):
        """
        Initialize Contract Deployer

        Args:
            w3: Web3 instance
            wallet: Signing wallet
            chain_id: Chain id used in the signed transaction
            receipt_timeout: Seconds to wait for the receipt (None = wait forever)
        """
        self.w3 = w3
        self.wallet = wallet
        self.chain_id = chain_id
        self.receipt_timeout = receipt_timeout

    def build_deployment_tx(self, artifact: DeploymentArtifact) -> Dict:
        """
        Build the unsigned creation transaction

        Gas and fee fields are filled in by web3.

        Raises:
            InvalidArtifactError: If web3 rejects the ABI or the constructor needs arguments
            DeploymentTransactionError: If the node rejects the build calls
        """
        try:
            Contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
            constructor = Contract.constructor()
        except ABI_ERRORS as e:
            raise InvalidArtifactError(f"Artifact ABI cannot be used for deployment: {e!r}") from e

        try:
            nonce = self.w3.eth.get_transaction_count(self.wallet.address)

            return constructor.build_transaction({
                'from': self.wallet.address,
                'nonce': nonce,
                'chainId': self.chain_id
            })
        except RPC_ERRORS as e:
            raise DeploymentTransactionError(f"Error building deployment transaction: {e}") from e

    async def submit(self, transaction: Dict) -> bytes:
        """
        Sign and broadcast a transaction

        Returns:
            Transaction hash

        Raises:
            DeploymentTransactionError: If signing or broadcast fails
        """
        try:
            signed_tx = self.wallet.sign_transaction(transaction)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except (*RPC_ERRORS, TypeError) as e:
            raise DeploymentTransactionError(f"Error sending deployment transaction: {e}") from e

        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")
        return tx_hash

    async def wait_for_deployment(self, tx_hash: bytes) -> DeployedContract:
        """
        Block until the creation transaction is mined

        Raises:
            DeploymentRevertedError: If the receipt status is 0
            DeploymentTransactionError: If the receipt cannot be fetched
        """
        tx_hex = Web3.to_hex(tx_hash)
        logger.info("Waiting for confirmation...")

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)
        except RPC_ERRORS as e:
            raise DeploymentTransactionError(f"Error waiting for {tx_hex}: {e}") from e

        if receipt['status'] != 1:
            raise DeploymentRevertedError(f"Deployment transaction {tx_hex} reverted")

        contract_address = receipt['contractAddress']
        if not contract_address:
            raise DeploymentTransactionError(f"Receipt for {tx_hex} has no contract address")

        deployed = DeployedContract(
            address=contract_address,
            transaction_hash=tx_hex,
            block_number=receipt.get('blockNumber'),
            gas_used=receipt.get('gasUsed')
        )

        logger.debug(f"Mined in block {deployed.block_number}, gas used {deployed.gas_used}")
        return deployed

    async def deploy(self, artifact: DeploymentArtifact) -> DeployedContract:
        """
        Deploy `artifact` and wait for one confirmation

        Returns:
            DeployedContract
        """
        logger.info("Building deployment transaction...")
        transaction = self.build_deployment_tx(artifact)

        tx_hash = await self.submit(transaction)
        return await self.wait_for_deployment(tx_hash)
