"""Tests for the neural-network approximator."""

import numpy as np
import pytest

from symbolic_approx import PreconditionError
from symbolic_approx.network import (
    NeuralNetwork,
    augment,
    leaky_relu,
    leaky_relu_derivative,
)
from symbolic_approx.quadrature import IntMethod, integrate
from symbolic_approx.sampling import sample


class TestActivation:

    def test_leaky_relu(self):
        np.testing.assert_allclose(leaky_relu(np.array([-2.0, 0.0, 3.0])), [-0.02, 0.0, 3.0])

    def test_leaky_relu_derivative(self):
        np.testing.assert_allclose(
            leaky_relu_derivative(np.array([-2.0, 3.0])), [0.01, 1.0]
        )

    def test_augment_appends_bias_input(self):
        np.testing.assert_array_equal(augment(np.array([2.0, 3.0])), [2.0, 3.0, 1.0])


class TestNetworkShape:

    def test_weight_shapes_include_bias_column(self):
        net = NeuralNetwork(2, 5, 3, np.random.default_rng(0))
        assert net.weights_ih.shape == (5, 3)
        assert net.weights_ho.shape == (3, 6)

    def test_forward_output_size(self):
        net = NeuralNetwork(2, 5, 3, np.random.default_rng(0))
        assert net.forward(np.array([0.1, 0.2])).shape == (3,)

    def test_seeded_networks_are_identical(self):
        a = NeuralNetwork(1, 8, 1, np.random.default_rng(3))
        b = NeuralNetwork(1, 8, 1, np.random.default_rng(3))
        assert a.eval_one(0.4) == b.eval_one(0.4)

    def test_invalid_sizes_rejected(self):
        with pytest.raises(PreconditionError):
            NeuralNetwork(0, 4, 1)


class TestTraining:

    def test_backward_reduces_sample_error(self):
        net = NeuralNetwork(1, 8, 1, np.random.default_rng(1))
        x = np.array([0.5])
        target = np.array([0.25])
        before = float((net.forward(x)[0] - 0.25) ** 2)
        net.backward(x, target, learning_rate=0.01)
        after = float((net.forward(x)[0] - 0.25) ** 2)
        assert after < before

    def test_train_batch_learns_line(self):
        rng = np.random.default_rng(7)
        net = NeuralNetwork(1, 16, 1, rng)
        xs = np.linspace(-1.0, 1.0, 32)
        inputs = [np.array([x]) for x in xs]
        targets = [np.array([0.5 * x]) for x in xs]
        first = net.train_batch(inputs, targets, learning_rate=0.01)
        for _ in range(300):
            last = net.train_batch(inputs, targets, learning_rate=0.01)
        assert last < first

    def test_mismatched_batch_rejected(self):
        net = NeuralNetwork(1, 4, 1, np.random.default_rng(0))
        with pytest.raises(PreconditionError):
            net.train_batch([np.array([0.0])], [], 0.1)


class TestScalarFunctionInterface:

    def test_can_be_sampled(self):
        net = NeuralNetwork(1, 4, 1, np.random.default_rng(2))
        points = sample(net, (-1.0, 1.0), 10)
        assert len(points) == 11
        assert points[3][1] == pytest.approx(net.eval_one(points[3][0]))

    def test_can_be_integrated(self):
        net = NeuralNetwork(1, 4, 1, np.random.default_rng(2))
        coarse = integrate(net, (0.0, 1.0), IntMethod.composite_trapezoidal(50))
        fine = integrate(net, (0.0, 1.0), IntMethod.composite_trapezoidal(500))
        assert coarse == pytest.approx(fine, abs=1e-2)
