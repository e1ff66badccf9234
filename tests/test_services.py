import copy
import random

from devsim.services import Services


def test_defaults():
    services = Services()
    assert services.global_time == 0.0
    assert isinstance(services.global_rng, random.Random)


def test_given_rng_is_kept():
    rng = random.Random(3)
    services = Services(rng, 2.5)
    assert services.global_rng is rng
    assert services.global_time == 2.5


def test_default_generators_have_separate_state():
    first = Services()
    second = Services()
    first.global_rng.seed(4)
    second.global_rng.seed(4)
    first_draw = first.global_rng.random()
    first.global_rng.random()
    assert second.global_rng.random() == first_draw


def test_copy_shares_generator_but_not_clock():
    services = Services(random.Random(1), 1.0)
    duplicate = copy.copy(services)
    duplicate.global_time = 9.0
    assert duplicate.global_rng is services.global_rng
    assert services.global_time == 1.0