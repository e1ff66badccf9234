import pytest

from devsim.errors import (
    DroppedMessageError,
    EmptyPolynomial,
    EventSchedulingError,
    FloatConvError,
    InvalidMessage,
    InvalidModelConfiguration,
    InvalidModelState,
    ModelCloneError,
    ModelNotFound,
    PortNotFound,
    PrerequisiteCalcError,
    SerializationError,
    SimulationError,
)


def test_invalid_model_configuration_message():
    assert (
        str(InvalidModelConfiguration())
        == "An invalid model configuration was encountered during simulation"
    )


def test_model_not_found_message():
    assert str(ModelNotFound()) == "A specified model cannot be found in the simulation"


def test_prerequisite_message():
    assert str(PrerequisiteCalcError()) == (
        "An internal logic error occured, where prerequisite calculations were not executed"
    )


def test_dropped_message_message():
    assert str(DroppedMessageError()) == (
        "A message was unexpectedly lost, dropped, or stuck during simulation execution"
    )


def test_errors_share_base_and_default_messages():
    errors = [
        InvalidModelConfiguration(),
        ModelNotFound(),
        PortNotFound(),
        ModelCloneError(),
        InvalidModelState(),
        EventSchedulingError(),
        InvalidMessage(),
        SerializationError(),
        EmptyPolynomial(),
        PrerequisiteCalcError(),
        FloatConvError(),
        DroppedMessageError(),
    ]
    for error in errors:
        assert isinstance(error, SimulationError)
        assert str(error) == type(error).message


def test_model_not_found_is_caught_as_base_error():
    error = ModelNotFound()
    assert isinstance(error, SimulationError)
    assert error.args == ("A specified model cannot be found in the simulation",)
    with pytest.raises(
        SimulationError, match="A specified model cannot be found in the simulation"
    ) as info:
        raise error
    assert info.value is error


def test_messages_are_distinct():
    messages = [
        str(InvalidModelConfiguration()),
        str(ModelNotFound()),
        str(PortNotFound()),
        str(ModelCloneError()),
        str(InvalidModelState()),
        str(EventSchedulingError()),
        str(InvalidMessage()),
        str(SerializationError()),
        str(EmptyPolynomial()),
        str(PrerequisiteCalcError()),
        str(FloatConvError()),
        str(DroppedMessageError()),
    ]
    assert len(set(messages)) == 12


def test_custom_message_overrides_default():
    error = PortNotFound("port 'job' missing")
    assert str(error) == "port 'job' missing"