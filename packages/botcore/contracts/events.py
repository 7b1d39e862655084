from __future__ import annotations

EventName = str


class Events:
    """
    Event channel names emitted on the client.
    """
    DEBUG: EventName = "debug"
    WARN: EventName = "warn"

    INTERACTION_CREATE: EventName = "interactionCreate"
    # deprecated alias of INTERACTION_CREATE
    INTERACTION: EventName = "interaction"

    HANDLER_ERROR: EventName = "system.handler_error"
