import math

import pytest

from neuralnet import activation as act
from neuralnet.activation import ActivationFunction


def logit(y):
    return -math.log((1 - y) / y)


@pytest.mark.parametrize("name", ["none", "step", "sigmoid"])
def test_recognized_identifiers(name):
    assert act.is_recognized(name)
    assert act.is_recognized(ActivationFunction(name))


@pytest.mark.parametrize("name", ["", "relu", "Sigmoid", None, "noActFunc"])
def test_unrecognized_identifiers(name):
    assert not act.is_recognized(name)


def test_none_is_identity():
    assert act.apply("none", 10.0) == 10.0
    assert act.apply(ActivationFunction.NONE, -3.5) == -3.5


def test_unknown_identifier_behaves_as_identity():
    assert act.apply("", 10.0) == 10.0
    assert act.apply("relu", -2.0) == -2.0
    assert act.apply(None, 7.0) == 7.0


@pytest.mark.parametrize("x, expected", [(-10.0, 0.0), (-0.1, 0.0), (0.0, 0.0), (0.1, 1.0), (10.0, 1.0)])
def test_step(x, expected):
    assert act.apply("step", x) == expected


def test_sigmoid_midpoint():
    assert act.apply("sigmoid", 0.0) == 0.5


def test_sigmoid_monotonic():
    xs = [-20.0, -5.0, -1.0, -0.1, 0.0, 0.1, 1.0, 5.0, 20.0]
    ys = [act.apply("sigmoid", x) for x in xs]
    assert ys == sorted(ys)
    assert all(0.0 <= y <= 1.0 for y in ys)


@pytest.mark.parametrize("y", [0.001, 0.1, 0.5, 0.6, 0.991])
def test_sigmoid_inverts_logit(y):
    assert act.apply("sigmoid", logit(y)) == pytest.approx(y)


def test_sigmoid_extremes_do_not_raise():
    assert act.apply("sigmoid", -1000.0) == 0.0
    assert act.apply("sigmoid", 1000.0) == 1.0
