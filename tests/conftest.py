from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from botcore.bootstrap import build_client
from botcore.client import Client
from botcore.registry.structures import StructureRegistry
from botcore.runtime.deprecation import DeprecationNotice


class Recorder:
    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)

    @property
    def values(self) -> List[Any]:
        return [c[0] for c in self.calls]


@pytest.fixture
def registry() -> StructureRegistry:
    return StructureRegistry()


@pytest.fixture
def client(registry: StructureRegistry) -> Client:
    return build_client(structures=registry)


@pytest.fixture
def notice() -> DeprecationNotice:
    return DeprecationNotice("The interaction event is deprecated. Use interactionCreate instead")


def command_payload(sub_type: Any = 1, **extra: Any) -> dict:
    payload = {
        "id": "1001",
        "application_id": "42",
        "type": 2,
        "token": "tok",
        "version": 1,
        "channel_id": "555",
        "guild_id": "777",
        "member": {"user": {"id": "9"}},
        "data": {"id": "c1", "name": "ping", "type": sub_type, "options": []},
    }
    payload.update(extra)
    return payload


def component_payload(component_type: Any = 2, **extra: Any) -> dict:
    payload = {
        "id": "2002",
        "type": 3,
        "channel_id": "556",
        "user": {"id": "10"},
        "message": {"id": "m1"},
        "data": {"custom_id": "btn", "component_type": component_type, "values": ["a", "b"]},
    }
    payload.update(extra)
    return payload
