from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .client import Client
from .config.loader import ClientConfig, load_config
from .registry.structures import StructureRegistry, build_default_registry


def build_client(
    config: Union[ClientConfig, Mapping[str, Any], None] = None,
    *,
    structures: Optional[StructureRegistry] = None,
) -> Client:
    """
    Build a client.
    Pass a registry that was already extended; extending after this call
    only affects structures constructed afterwards.
    """
    if not isinstance(config, ClientConfig):
        config = load_config(config)

    logging.getLogger("botcore").setLevel(getattr(logging, config.log_level, logging.INFO))
    return Client(structures=structures or build_default_registry(), config=config)
