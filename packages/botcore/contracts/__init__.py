from .errors import (
    InvalidArgument,
    StructureContractViolation,
    StructureError,
    UnknownStructure,
    UnrecognizedDiscriminant,
)
from .events import Events
from .payloads import ApplicationCommandType, InteractionType, MessageComponentType

__all__ = [
    "ApplicationCommandType",
    "Events",
    "InteractionType",
    "InvalidArgument",
    "MessageComponentType",
    "StructureContractViolation",
    "StructureError",
    "UnknownStructure",
    "UnrecognizedDiscriminant",
]
