from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..contracts.payloads import RawPayload

if TYPE_CHECKING:
    from ..cache.channels import PartialChannel
    from ..client import Client


class Action:
    """
    Gateway-level adapter: turns one decoded packet into client state and events.

    MUST NOT:
    - mutate the payload
    - raise for unknown/unsupported payload data
    """

    def __init__(self, client: "Client") -> None:
        self.client = client

    def get_channel(self, data: RawPayload) -> Optional["PartialChannel"]:
        return self.client.channels.resolve_partial_channel(data)

    def handle(self, data: RawPayload) -> None:
        raise NotImplementedError
