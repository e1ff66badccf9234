"""Discrete event simulation of coupled models.

Models exchange messages through connectors, following the Discrete Event
System Specification.  Each step runs external transitions for pending
messages, advances the clock, runs due internal transitions and returns the
messages they produced.
"""

from __future__ import annotations

import copy
import math
import random
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from devsim.coupling import Connector, Message
from devsim.errors import ModelNotFound
from devsim.services import Services


@dataclass(frozen=True)
class ModelMessage:
    """A message as seen by a model: a port name and its content."""

    port_name: str
    content: str


class DevsModel(ABC):
    """The behaviour every simulation model provides."""

    @abstractmethod
    def events_ext(self, incoming_message: ModelMessage, services: Services) -> None:
        """React to a message arriving on an input port."""

    @abstractmethod
    def events_int(self, services: Services) -> list[ModelMessage]:
        """Run the internal event that is due and return outgoing messages."""

    @abstractmethod
    def time_advance(self, time_delta: float) -> None:
        """Move the model's own clock forward by ``time_delta``."""

    @abstractmethod
    def until_next_event(self) -> float:
        """Time remaining until the model's next internal event."""

    @abstractmethod
    def status(self) -> str:
        """A short description of the model's current state."""

    @abstractmethod
    def records(self) -> list[Any]:
        """Records the model has kept."""


def _copy_models(
    models: Mapping[str, DevsModel] | Iterable[tuple[str, DevsModel]] | None,
) -> dict[str, DevsModel]:
    return {} if models is None else copy.deepcopy(dict(models))


class Simulation:
    """Models, connectors, pending messages and the services they share."""

    def __init__(
        self,
        models: Mapping[str, DevsModel] | Iterable[tuple[str, DevsModel]] | None = None,
        connectors: Iterable[Connector] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._models = _copy_models(models)
        self._connectors = list(connectors or ())
        self._messages: list[Message] = []
        self._services = Services() if rng is None else Services(global_rng=rng)

    @property
    def models(self) -> Mapping[str, DevsModel]:
        """Read-only view of the models, by id."""
        return MappingProxyType(self._models)

    @property
    def connectors(self) -> tuple[Connector, ...]:
        """The connectors, in configuration order."""
        return tuple(self._connectors)

    @property
    def messages(self) -> list[Message]:
        """The messages active at the current point of the simulation."""
        return list(self._messages)

    @property
    def global_time(self) -> float:
        """The simulation clock."""
        return self._services.global_time

    @property
    def services(self) -> Services:
        """The services handed to models."""
        return self._services

    def set_rng(self, rng: random.Random) -> None:
        """Replace the shared random number generator."""
        self._services.global_rng = rng

    def put(
        self,
        models: Mapping[str, DevsModel] | Iterable[tuple[str, DevsModel]],
        connectors: Iterable[Connector],
    ) -> None:
        """Replace the models (with copies) and the connectors."""
        self._models = _copy_models(models)
        self._connectors = list(connectors)

    def model(self, model_id: str) -> DevsModel:
        """The model with the given id."""
        try:
            return self._models[model_id]
        except KeyError:
            raise ModelNotFound() from None

    def status(self, model_id: str) -> str:
        """Status of the model with the given id."""
        return self.model(model_id).status()

    def records(self, model_id: str) -> list[Any]:
        """Records of the model with the given id."""
        return self.model(model_id).records()

    def reset(self) -> None:
        """Clear messages and the clock, keeping the random number generator."""
        self.reset_messages()
        self.reset_global_time()

    def reset_messages(self) -> None:
        """Drop all active messages."""
        self._messages = []

    def reset_global_time(self) -> None:
        """Set the clock back to zero."""
        self._services.global_time = 0.0

    def inject_input(self, message: Message) -> None:
        """Add a message to be delivered on the next step."""
        self._messages.append(message)

    def until_next_event(self) -> float:
        """The earliest next-event time over all models."""
        return min(
            (model.until_next_event() for model in self._models.values()),
            default=math.inf,
        )

    def time_advance(self, time_delta: float) -> None:
        """Advance every model's clock by ``time_delta``."""
        for model in self._models.values():
            model.time_advance(time_delta)

    def handle_messages(self, messages: Iterable[Message]) -> None:
        """Deliver messages to their target models."""
        for message in messages:
            model = self.model(message.target_id)
            model.events_ext(
                ModelMessage(message.target_port, message.content),
                copy.copy(self._services),
            )

    def _targets(self, source_id: str, source_port: str) -> Iterator[tuple[str, str]]:
        for connector in self._connectors:
            if connector.source_id == source_id and connector.source_port == source_port:
                yield connector.target_id, connector.target_port

    def map_new_messages(
        self, model_id: str, new_messages: Iterable[ModelMessage]
    ) -> list[Message]:
        """Route a model's outgoing messages to all connected targets."""
        return [
            routed
            for outgoing in new_messages
            for routed in self.map_new_message(model_id, outgoing)
        ]

    def map_new_message(self, model_id: str, new_message: ModelMessage) -> list[Message]:
        """Route one outgoing message to all connected targets."""
        return [
            Message(
                model_id,
                new_message.port_name,
                target_id,
                target_port,
                self._services.global_time,
                new_message.content,
            )
            for target_id, target_port in self._targets(model_id, new_message.port_name)
        ]

    def step(self) -> list[Message]:
        """Run one discrete event step and return the messages it produced."""
        self.handle_messages(list(self._messages))
        delta = 0.0 if self._messages else self.until_next_event()
        self.time_advance(delta)
        self._services.global_time += delta

        next_messages: list[Message] = []
        for model_id in list(self._models):
            model = self.model(model_id)
            if model.until_next_event() == 0.0:
                outgoing = model.events_int(self._services)
                next_messages.extend(self.map_new_messages(model_id, outgoing))
        self._messages = next_messages
        return list(next_messages)

    def step_until(self, until: float) -> list[Message]:
        """Step until the clock reaches ``until``; return the messages before it."""
        records: list[Message] = []
        while True:
            self.step()
            if self._services.global_time < until:
                records.extend(self._messages)
            else:
                return records

    def step_n(self, n: int) -> list[Message]:
        """Run ``n`` steps and return all the messages they produced."""
        records: list[Message] = []
        for _ in range(n):
            records.extend(self.step())
        return records