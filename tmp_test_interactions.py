from botcore.bootstrap import build_client
from botcore.contracts.events import Events
from botcore.registry.structures import StructureRegistry
from botcore.runtime.logging import setup_logging


def main() -> None:
    setup_logging("DEBUG")

    registry = StructureRegistry()

    def with_reply(ButtonInteraction):
        class ReplyingButton(ButtonInteraction):
            def reply_text(self) -> str:
                return f"clicked {self.custom_id}"

        return ReplyingButton

    registry.extend("ButtonInteraction", with_reply)

    client = build_client({"log_level": "DEBUG"}, structures=registry)

    client.on(Events.INTERACTION_CREATE, lambda i: print("[create]", i, getattr(i, "reply_text", lambda: "")()))
    client.on(Events.INTERACTION, lambda i: print("[alias]", i))
    client.on(Events.DEBUG, lambda msg: print("[debug]", msg))

    packets = [
        {"t": "INTERACTION_CREATE", "d": {"id": "1", "type": 2, "channel_id": "10", "data": {"type": 1, "name": "ping"}}},
        {"t": "INTERACTION_CREATE", "d": {"id": "2", "type": 3, "data": {"component_type": 2, "custom_id": "ok"}}},
        {"t": "INTERACTION_CREATE", "d": {"id": "3", "type": 3, "data": {"component_type": 999}}},
        {"t": "INTERACTION_CREATE", "d": {"id": "4", "type": 9}},
    ]
    for packet in packets:
        client.actions.handle_packet(packet)

    print("channels cached:", [c.id for c in client.channels])
    print("NOTE: the deprecation warning for 'interaction' should appear only once")


if __name__ == "__main__":
    main()
