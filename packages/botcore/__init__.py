from .bootstrap import build_client
from .client import Client
from .config.loader import ClientConfig, load_config, load_config_from_env
from .contracts.errors import (
    InvalidArgument,
    StructureContractViolation,
    StructureError,
    UnknownStructure,
    UnrecognizedDiscriminant,
)
from .contracts.events import Events
from .registry.structures import EXTENDABLE_STRUCTURES, StructureRegistry, build_default_registry

__version__ = "0.1.0"
