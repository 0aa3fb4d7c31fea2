"""
Network Configuration
Reads the network config file and rewrites it after a deployment
"""

import json
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from loguru import logger

from .exceptions import (
    ConfigWriteError,
    InvalidNetworkConfigError,
    NetworkConfigNotFoundError,
    NetworkNotFoundError,
)


@dataclass(frozen=True)
class NetworkEntry:
    """One network: RPC url, chain id and last deployed address"""

    name: str
    url: str
    chain_id: int
    address: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        entry = {'url': self.url, 'chainId': self.chain_id}
        if self.address is not None:
            entry['address'] = self.address
        return entry


@dataclass(frozen=True)
class NetworkConfig:
    """Immutable view of the configuration file"""

    networks: Mapping[str, NetworkEntry]

    def network(self, name: str) -> NetworkEntry:
        """
        Get a network entry

        Raises:
            NetworkNotFoundError: If the network is not configured
        """
        if name not in self.networks:
            raise NetworkNotFoundError(f"Network '{name}' not found in configuration")
        return self.networks[name]

    def with_deployment(self, name: str, address: str) -> 'NetworkConfig':
        """
        Build the config written after a deployment

        The result holds only the deployed network, with its url, chain id
        and the new address. Other networks are not carried over.
        """
        entry = self.network(name)
        updated = NetworkEntry(name=name, url=entry.url, chain_id=entry.chain_id, address=address)
        return NetworkConfig(networks=MappingProxyType({name: updated}))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'networks': {name: entry.to_dict() for name, entry in self.networks.items()}
        }


def _parse_entry(name: str, raw: Any) -> NetworkEntry:
    if not isinstance(raw, dict):
        raise InvalidNetworkConfigError(f"Network '{name}' must be an object")

    url = raw.get('url')
    if not isinstance(url, str) or not url.strip():
        raise InvalidNetworkConfigError(f"Network '{name}' has no url")

    chain_id = raw.get('chainId')
    # bool is an int subclass
    if not isinstance(chain_id, int) or isinstance(chain_id, bool):
        raise InvalidNetworkConfigError(f"Network '{name}' chainId must be an integer")

    address = raw.get('address')
    if address is not None and not isinstance(address, str):
        raise InvalidNetworkConfigError(f"Network '{name}' address must be a string")

    return NetworkEntry(name=name, url=url, chain_id=chain_id, address=address)


def load_network_config(config_path: Union[Path, str]) -> NetworkConfig:
    """
    Load the network configuration file

    Args:
        config_path: Path to the JSON config file

    Returns:
        NetworkConfig

    Raises:
        NetworkConfigNotFoundError: If the file does not exist
        InvalidNetworkConfigError: If the file is malformed
    """
    path = Path(config_path)

    try:
        with open(path, 'r') as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise NetworkConfigNotFoundError(f"Network config not found: {path}") from e
    except json.JSONDecodeError as e:
        raise InvalidNetworkConfigError(f"Network config is not valid JSON: {path}") from e

    networks = raw.get('networks') if isinstance(raw, dict) else None
    if not isinstance(networks, dict):
        raise InvalidNetworkConfigError("Network config must contain a 'networks' object")

    entries = {name: _parse_entry(name, data) for name, data in networks.items()}
    return NetworkConfig(networks=MappingProxyType(entries))


def save_network_config(config: NetworkConfig, config_path: Union[Path, str]) -> None:
    """
    Overwrite the configuration file with `config`

    The previous content is replaced entirely. The document is written to a
    temporary file next to the target and moved into place, so a failed write
    leaves the old file intact.

    Raises:
        ConfigWriteError: If the file cannot be written
    """
    path = Path(config_path)
    tmp_path = None

    try:
        with tempfile.NamedTemporaryFile('w', dir=path.parent, prefix=f".{path.name}.", suffix='.tmp', delete=False) as f:
            tmp_path = Path(f.name)
            json.dump(config.to_dict(), f, indent=4)
            f.write('\n')
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise ConfigWriteError(f"Cannot write network config {path}: {e}") from e

    logger.success(f"Updated {path.name} with deployed contract address")
