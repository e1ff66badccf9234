# devsim

A discrete event simulation library based on the Discrete Event System
Specification (DEVS). You write models, connect their ports, step the
simulation, inject messages and analyse the output.

## Installation

```
pip install devsim
```

## Building a simulation

A model is a subclass of `devsim.simulator.DevsModel`. It implements six
methods: `events_ext`, `events_int`, `time_advance`, `until_next_event`,
`status` and `records`. Inside a model, messages are
`devsim.simulator.ModelMessage` values, which hold a `port_name` and a
`content`.

A `devsim.coupling.Connector` joins one model's output port to another
model's input port. Its fields are `id`, `source_id`, `target_id`,
`source_port` and `target_port`. Messages between models are
`devsim.coupling.Message` values. Their fields are `source_id`,
`source_port`, `target_id`, `target_port`, `time` and `content`.
Connectors and messages have `to_dict` and `from_dict` methods.
`Connector` uses the keys `id`, `sourceID`, `targetID`, `sourcePort` and
`targetPort`. `Message` uses the keys `sourceId`, `sourcePort`, `targetId`,
`targetPort`, `time` and `content`.

```python
import math

from devsim.coupling import Connector, Message
from devsim.simulator import DevsModel, ModelMessage, Simulation


class Echo(DevsModel):
    """Sends each received message back out on its "out" port."""

    def __init__(self):
        self.pending = []
        self.log = []

    def events_ext(self, incoming_message, services):
        self.pending.append(incoming_message.content)

    def events_int(self, services):
        out = [ModelMessage("out", content) for content in self.pending]
        self.pending.clear()
        return out

    def time_advance(self, time_delta):
        pass

    def until_next_event(self):
        return 0.0 if self.pending else math.inf

    def status(self):
        return "Echoing"

    def records(self):
        return self.log


simulation = Simulation(
    {"echo-01": Echo(), "echo-02": Echo()},
    [Connector("c-01", "echo-01", "echo-02", "out", "in")],
)
simulation.inject_input(Message("manual", "manual", "echo-01", "in", 0.0, "hello"))
messages = simulation.step_n(3)
```

`Simulation(models, connectors, rng)` takes either a mapping of model ids
to models or pairs of id and model. It stores deep copies of the models.
The optional `rng` is a `random.Random`, and it reaches models as
`services.global_rng`. Models also get the clock as `services.global_time`
(see `devsim.services.Services`). `put(models, connectors)` replaces the
configuration, and `set_rng(rng)` replaces the generator.

Stepping:

- `step()` runs one step. It delivers pending messages, then advances the
  clock to the next event, or not at all while messages are pending. It
  then runs the internal events that are due and returns the messages they
  produced.
- `step_n(n)` runs `n` steps and returns every message produced.
- `step_until(t)` steps until the global time reaches `t`. It returns the
  messages produced before that point.

Inspection and control:

- The `models`, `connectors`, `messages` and `global_time` properties.
- `model(id)`, `status(id)` and `records(id)`.
- `until_next_event()`.
- `inject_input(message)`.
- `reset()`, which clears the active messages and the clock but keeps the
  random number generator. This lets you run independent replications on
  one simulation. `reset_messages()` and `reset_global_time()` do each
  half on its own.

## Output analysis

`devsim.output_analysis` has these tools:

- `IndependentSample(points)` is for independent, identically distributed
  samples. It provides `point_estimate_mean()`, `variance()` and
  `confidence_interval_mean(alpha)`.
- `SteadyStateOutput(time_series)` is for one long time series. It deletes
  initialisation bias (MSER) and uses batch means to deal with
  autocorrelation. It provides `point_estimate_mean()` and
  `confidence_interval_mean(alpha)`. It needs at least two points.
- `TerminatingSimulationOutput(time_series)` collects replications through
  `put_time_series`. It does not compute estimates from them.

Confidence intervals are `ConfidenceInterval` values, with `lower`,
`upper` and `half_width()`.

```python
from devsim.output_analysis import IndependentSample

sample = IndependentSample([1.02, 0.73, 3.20, 0.23, 1.76, 0.47, 1.89, 1.45, 0.44, 0.23])
interval = sample.confidence_interval_mean(0.1)
print(interval.lower, interval.upper, interval.half_width())
```

The supported values of alpha are 0.1, 0.05, 0.025, 0.01, 0.005, 0.001
and 0.0005. `devsim.t_scores.t_score(alpha, df)` raises `ValueError` for
any other alpha. It uses Student t values up to 100 degrees of freedom and
normal values beyond that.

## Utilities

- `devsim.utils.evaluate_polynomial` evaluates a polynomial with its
  coefficients given from the highest order down.
- `horner_fold` takes the coefficients from the lowest order up.
- `integer_sqrt` computes the integer square root of a non-negative
  integer.

## Errors

The simulation errors derive from `devsim.errors.SimulationError`. For
example, `ModelNotFound` is raised when a message or query names a model
that is not in the simulation. Invalid arguments raise `ValueError`. This
covers an unsupported alpha, a negative square root argument and a series
that is too short.

## What it does not do

devsim has no ready-made models such as generators, processors or queues.
You write every model as a `DevsModel` subclass. It does not load whole
simulations from JSON or YAML files, and it has no command-line interface.