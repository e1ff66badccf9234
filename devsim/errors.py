"""Exception hierarchy raised by the simulation package."""


class SimulationError(Exception):
    """Base class for every error raised during simulation or analysis."""

    message = "A simulation error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class InvalidModelConfiguration(SimulationError):
    """An invalid model configuration was met during simulation."""

    message = "An invalid model configuration was encountered during simulation"


class ModelNotFound(SimulationError):
    """An operation named a model that does not exist."""

    message = "A specified model cannot be found in the simulation"


class PortNotFound(SimulationError):
    """An operation named a model port that does not exist."""

    message = "A specified model port cannot be found in the simulation"


class ModelCloneError(SimulationError):
    """A model could not be copied."""

    message = "A model failed to clone during simulation"


class InvalidModelState(SimulationError):
    """A model reached a state it should never be in."""

    message = "An invalid model state was encountered"


class EventSchedulingError(SimulationError):
    """Event scheduling reached an invalid state."""

    message = "An invalid state was encountered, with respect to event scheduling"


class InvalidMessage(SimulationError):
    """An inter-model message could not be handled."""

    message = "An invalid inter-model message was encountered"


class SerializationError(SimulationError):
    """A model could not be serialized."""

    message = "Failed to serialize a simulation model"


class EmptyPolynomial(SimulationError):
    """A polynomial was configured without coefficients."""

    message = "A polynomial was configured in a simulation, but the coefficients are empty"


class PrerequisiteCalcError(SimulationError):
    """A calculation ran before the calculations it depends on."""

    message = (
        "An internal logic error occured, where prerequisite calculations "
        "were not executed"
    )


class FloatConvError(SimulationError):
    """A value could not be converted to a float."""

    message = "Failed to convert to a Float value"


class DroppedMessageError(SimulationError):
    """A message was lost, dropped or stuck during execution."""

    message = (
        "A message was unexpectedly lost, dropped, or stuck during "
        "simulation execution"
    )