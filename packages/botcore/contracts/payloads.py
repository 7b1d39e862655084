from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

RawPayload = Mapping[str, Any]

E = TypeVar("E", bound=IntEnum)


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class MessageComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2
    SELECT_MENU = 3
    TEXT_INPUT = 4


# short names accepted besides the member names
NAME_ALIASES: Dict[type, Dict[str, IntEnum]] = {
    InteractionType: {
        "COMMAND": InteractionType.APPLICATION_COMMAND,
        "COMPONENT": InteractionType.MESSAGE_COMPONENT,
        "AUTOCOMPLETE": InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE,
        "MODAL": InteractionType.MODAL_SUBMIT,
    },
    MessageComponentType: {
        "SELECT": MessageComponentType.SELECT_MENU,
    },
}


def coerce_enum(enum_cls: Type[E], value: Any) -> Optional[E]:
    """
    Map a wire value (int) or a name to an enum member.

    Names are case-insensitive; spaces and hyphens count as underscores, so
    "modal submit" and "select-menu" resolve. Short names from NAME_ALIASES
    ("autocomplete", "component", ...) are accepted too.
    Returns None for anything unknown; bools are never accepted as ints.
    """
    if isinstance(value, enum_cls):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_cls(value)
        except ValueError:
            return None

    if isinstance(value, str):
        name = value.strip().upper().replace(" ", "_").replace("-", "_")
        member = enum_cls.__members__.get(name)
        if member is None:
            member = NAME_ALIASES.get(enum_cls, {}).get(name)  # type: ignore[assignment]
        return member

    return None


def interaction_kind(payload: RawPayload) -> Any:
    """
    Top-level discriminant. Wire payloads use `type`; `kind` is accepted as an alias.
    """
    if "type" in payload:
        return payload["type"]
    return payload.get("kind")


def as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def payload_data(payload: RawPayload) -> Mapping[str, Any]:
    return as_mapping(payload.get("data"))


def payload_user(payload: RawPayload) -> Mapping[str, Any]:
    """
    Invoking user: top-level `user` (DMs) or `member.user` (guilds).
    """
    user = as_mapping(payload.get("user"))
    if user:
        return user
    return as_mapping(as_mapping(payload.get("member")).get("user"))
