from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


class StructureError(Exception):
    pass


class InvalidArgument(StructureError, TypeError):
    pass


class UnknownStructure(StructureError, LookupError):
    pass


class StructureContractViolation(StructureError, TypeError):
    pass


DiscriminantScope = Literal["interaction", "command", "component"]


@dataclass(frozen=True)
class UnrecognizedDiscriminant:
    """
    Non-fatal dispatch condition: a discriminant value outside the known set.
    Reported on the debug channel, never raised.
    """
    scope: DiscriminantScope
    field: str
    value: Any

    @property
    def template_key(self) -> str:
        return f"unknown_{self.scope}_type"
