from __future__ import annotations

from botcore.contracts.events import Events
from botcore.structures import ButtonInteraction

from conftest import Recorder, component_payload


def test_routes_interaction_create(client) -> None:
    created = Recorder()
    client.on(Events.INTERACTION_CREATE, created)

    handled = client.actions.handle_packet({"op": 0, "t": "INTERACTION_CREATE", "d": component_payload(2)})

    assert handled is True
    assert type(created.values[0]) is ButtonInteraction
    assert created.values[0].channel.id == "556"


def test_unhandled_packet_reports_debug(client) -> None:
    debug = Recorder()
    client.on(Events.DEBUG, debug)

    assert client.actions.handle_packet({"t": "TYPING_START", "d": {}}) is False
    assert debug.values == ["[ACTIONS] Unhandled packet: TYPING_START"]


def test_structures_read_payload_fields(client) -> None:
    created = Recorder()
    client.on(Events.INTERACTION_CREATE, created)

    client.actions.handle_packet(
        {
            "t": "INTERACTION_CREATE",
            "d": {
                "id": "9",
                "type": 5,
                "data": {
                    "custom_id": "feedback",
                    "components": [{"type": 1, "components": [{"custom_id": "text", "value": "hi"}]}],
                },
            },
        }
    )

    modal = created.values[0]
    assert modal.is_modal_submit()
    assert modal.field_value("text") == "hi"
    assert modal.field_value("absent") is None
    assert modal.channel is None
    assert not modal.in_guild()
