"""
Contract Deployment
Deploys the compiled contract to Sonic and writes its address to config/network_config.json
"""

import asyncio
import sys
from pathlib import Path
from loguru import logger

from deployer import Deployer

ROOT = Path(__file__).resolve().parent

ARTIFACT_PATH = ROOT / "artifacts" / "metadata.json"
CONFIG_PATH = ROOT / "config" / "network_config.json"
ENV_PATH = ROOT / ".env"
LOG_PATH = ROOT / "logs" / "deploy.log"


def configure_logging(log_path: Path = LOG_PATH):
    """Send INFO to stderr and DEBUG to a rotating log file"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level="INFO"
    )
    logger.add(
        log_path,
        rotation="1 day",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        level="DEBUG"
    )


async def main() -> int:
    """Run the deployment and return the process exit status"""
    logger.info("🚀 Deploying to Sonic...")

    deployer = Deployer(
        artifact_path=ARTIFACT_PATH,
        config_path=CONFIG_PATH,
        env_file=ENV_PATH
    )
    result = await deployer.deploy()

    if not result.success:
        logger.error(f"Deployment failed ({type(result.error).__name__}): {result.error}")
        return 1

    logger.success(f"contract deployed to {result.address}")
    logger.info(f"Transaction hash: {result.transaction_hash}")
    return 0


if __name__ == "__main__":
    configure_logging()

    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        exit_code = 130
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        exit_code = 1

    sys.exit(exit_code)
