from .structures import (
    DEFAULT_STRUCTURES,
    EXTENDABLE_STRUCTURES,
    ExtendableStructure,
    StructureRegistry,
    build_default_registry,
)
