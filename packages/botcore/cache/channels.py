from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional

from ..contracts.payloads import RawPayload, payload_user

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartialChannel:
    """
    Minimal channel record resolved from an interaction payload.
    """
    id: str
    guild_id: Optional[str] = None
    recipient_id: Optional[str] = None
    # True when only the id is known (no full channel record in the payload)
    partial: bool = True
    raw: Mapping[str, Any] = None  # type: ignore[assignment]


class ChannelCache:
    """
    In-memory channel store used by `Interaction.channel`.
    Known channels are never downgraded to partials.
    """

    def __init__(self, *, partials_enabled: bool = True) -> None:
        self._partials_enabled = partials_enabled
        self._channels: Dict[str, PartialChannel] = {}

    def __len__(self) -> int:
        return len(self._channels)

    def __contains__(self, channel_id: object) -> bool:
        return channel_id in self._channels

    def __iter__(self) -> Iterator[PartialChannel]:
        return iter(list(self._channels.values()))

    def get(self, channel_id: str) -> Optional[PartialChannel]:
        return self._channels.get(channel_id)

    def add(self, channel: PartialChannel) -> PartialChannel:
        existing = self._channels.get(channel.id)
        if existing is not None and not existing.partial and channel.partial:
            return existing
        self._channels[channel.id] = channel
        return channel

    def resolve_partial_channel(self, payload: RawPayload) -> Optional[PartialChannel]:
        """
        Make the channel referenced by an interaction payload resolvable by id.
        """
        channel_data = payload.get("channel")
        if isinstance(channel_data, Mapping) and channel_data.get("id") is not None:
            return self.add(
                PartialChannel(
                    id=str(channel_data["id"]),
                    guild_id=channel_data.get("guild_id", payload.get("guild_id")),
                    partial=False,
                    raw=channel_data,
                )
            )

        channel_id = payload.get("channel_id")
        if channel_id is None or not self._partials_enabled:
            return None

        existing = self._channels.get(str(channel_id))
        if existing is not None:
            return existing

        user = payload_user(payload)
        channel = PartialChannel(
            id=str(channel_id),
            guild_id=payload.get("guild_id"),
            recipient_id=user.get("id"),
            raw={},
        )
        logger.debug("Cached partial channel id=%s guild=%s", channel.id, channel.guild_id)
        return self.add(channel)
