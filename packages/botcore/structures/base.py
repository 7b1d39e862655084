from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from ..client import Client


class Base:
    """
    Root of every extendable structure.

    Constructed as `cls(client, data)`; keeps the raw payload untouched and
    reads the few fields it exposes from it.
    """

    def __init__(self, client: "Client", data: Mapping[str, Any]) -> None:
        self.client = client
        self._raw = data
        self.id: Optional[str] = data.get("id")

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._raw

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
