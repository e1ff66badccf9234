"""Connectors between models and the messages that travel along them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _field(data: Mapping[str, Any], key: str, kind: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{kind} is missing the field {key!r}") from None


@dataclass(frozen=True)
class Connector:
    """A link from one model's output port to another model's input port."""

    id: str
    source_id: str
    target_id: str
    source_port: str
    target_port: str

    def to_dict(self) -> dict[str, str]:
        """Serialize with the keys used in simulation configurations."""
        return {
            "id": self.id,
            "sourceID": self.source_id,
            "targetID": self.target_id,
            "sourcePort": self.source_port,
            "targetPort": self.target_port,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Connector:
        """Build a connector from its configuration mapping."""
        return cls(
            id=str(_field(data, "id", "connector")),
            source_id=str(_field(data, "sourceID", "connector")),
            target_id=str(_field(data, "targetID", "connector")),
            source_port=str(_field(data, "sourcePort", "connector")),
            target_port=str(_field(data, "targetPort", "connector")),
        )


@dataclass(frozen=True)
class Message:
    """Content sent from a source model and port to a target model and port."""

    source_id: str
    source_port: str
    target_id: str
    target_port: str
    time: float
    content: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camel-case keys."""
        return {
            "sourceId": self.source_id,
            "sourcePort": self.source_port,
            "targetId": self.target_id,
            "targetPort": self.target_port,
            "time": self.time,
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        """Build a message from its camel-case mapping."""
        return cls(
            source_id=str(_field(data, "sourceId", "message")),
            source_port=str(_field(data, "sourcePort", "message")),
            target_id=str(_field(data, "targetId", "message")),
            target_port=str(_field(data, "targetPort", "message")),
            time=float(_field(data, "time", "message")),
            content=str(_field(data, "content", "message")),
        )