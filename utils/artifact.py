"""
Deployment Artifact
Loads compiled contract ABI and bytecode from a build output file
"""

import json
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from loguru import logger

from .exceptions import ArtifactNotFoundError, InvalidArtifactError

HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class DeploymentArtifact:
    """Compiled contract as produced by the external compiler"""

    abi: List[Dict[str, Any]]
    bytecode: str  # 0x-prefixed hex


def _normalize_bytecode(raw: Any) -> str:
    """Return 0x-prefixed bytecode or raise InvalidArtifactError"""
    # Foundry / solc standard JSON nest the hex under "object"
    if isinstance(raw, dict):
        raw = raw.get('object')

    if not isinstance(raw, str):
        raise InvalidArtifactError("Artifact bytecode must be a hex string")

    hex_body = raw.strip()
    if hex_body[:2].lower() == '0x':
        hex_body = hex_body[2:]

    if not hex_body:
        raise InvalidArtifactError("Artifact bytecode is empty")

    if len(hex_body) % 2 or not set(hex_body) <= HEX_DIGITS:
        raise InvalidArtifactError("Artifact bytecode is not valid hex")

    return '0x' + hex_body


def load_artifact(artifact_path: Union[Path, str]) -> DeploymentArtifact:
    """
    Load a deployment artifact

    Args:
        artifact_path: JSON file exposing `abi` and `bytecode`

    Returns:
        DeploymentArtifact

    Raises:
        ArtifactNotFoundError: If the file does not exist
        InvalidArtifactError: If the file is not JSON or lacks a usable ABI/bytecode
    """
    path = Path(artifact_path)

    try:
        with open(path, 'r') as f:
            contract_json = json.load(f)
    except FileNotFoundError as e:
        raise ArtifactNotFoundError(f"Contract artifact not found: {path}") from e
    except json.JSONDecodeError as e:
        raise InvalidArtifactError(f"Contract artifact is not valid JSON: {path}") from e

    if not isinstance(contract_json, dict):
        raise InvalidArtifactError("Contract artifact must be a JSON object")

    abi = contract_json.get('abi')
    if not isinstance(abi, list) or not abi:
        raise InvalidArtifactError("Artifact ABI must be a non-empty list")

    bytecode = _normalize_bytecode(contract_json.get('bytecode'))

    logger.debug(f"Loaded artifact {path.name}: {len(abi)} ABI entries, {len(bytecode) // 2 - 1} bytes")
    return DeploymentArtifact(abi=abi, bytecode=bytecode)
