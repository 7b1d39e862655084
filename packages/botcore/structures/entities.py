from __future__ import annotations

from typing import Any, Mapping

from ..contracts.payloads import as_list, as_mapping
from .base import Base


class User(Base):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.username = data.get("username")
        self.bot = bool(data.get("bot", False))


class Guild(Base):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.name = data.get("name")
        self.owner_id = data.get("owner_id")


class GuildMember(Base):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        user = as_mapping(data.get("user"))
        # members are keyed by their user id
        self.id = user.get("id", self.id)
        self.nick = data.get("nick")
        self.roles = as_list(data.get("roles"))


class ThreadMember(Base):
    pass


class Role(Base):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.name = data.get("name")


class GuildEmoji(Base):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.name = data.get("name")


class Message(Base):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.channel_id = data.get("channel_id")
        self.content = data.get("content", "")


class MessageReaction(Base):
    pass


class Presence(Base):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.status = data.get("status", "offline")


class ClientPresence(Presence):
    pass


class VoiceState(Base):
    pass


class StageInstance(Base):
    pass
