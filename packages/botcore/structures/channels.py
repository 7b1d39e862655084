from __future__ import annotations

from typing import Any, Mapping

from .base import Base


class Channel(Base):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.type = data.get("type")
        self.name = data.get("name")


class DMChannel(Channel):
    pass


class PartialGroupDMChannel(Channel):
    pass


class GuildChannel(Channel):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.guild_id = data.get("guild_id")
        self.parent_id = data.get("parent_id")


class TextChannel(GuildChannel):
    pass


class NewsChannel(TextChannel):
    pass


class VoiceChannel(GuildChannel):
    pass


class StageChannel(VoiceChannel):
    pass


class CategoryChannel(GuildChannel):
    pass


class ThreadChannel(GuildChannel):
    pass
