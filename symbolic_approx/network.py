"""
A one-hidden-layer neural network as an alternative function approximator.

Hidden units use leaky ReLU; the output layer is linear. Both weight
matrices use the bias trick: a constant 1 is appended to the layer input
and the last column of each matrix holds the biases.

The network exposes eval_one / eval_many, so it can be sampled, integrated
and used as a fitting target exactly like an Expression or a Polynomial.
"""

import logging
import numpy as np
from typing import List, Optional

from .exceptions import PreconditionError

logger = logging.getLogger(__name__)

LEAKY_SLOPE = 0.01


def leaky_relu(x: np.ndarray) -> np.ndarray:
    return np.where(x > 0.0, x, LEAKY_SLOPE * x)


def leaky_relu_derivative(x: np.ndarray) -> np.ndarray:
    return np.where(x > 0.0, 1.0, LEAKY_SLOPE)


def augment(v: np.ndarray) -> np.ndarray:
    """Append a constant 1 for the bias column."""
    return np.append(v, 1.0)


class NeuralNetwork:
    """input -> leaky-ReLU hidden layer -> linear output."""

    def __init__(
        self,
        input_size: int,
        hidden_size: int,
        output_size: int,
        rng: Optional[np.random.Generator] = None,
    ):
        if min(input_size, hidden_size, output_size) < 1:
            raise PreconditionError("layer sizes must all be >= 1")
        rng = rng if rng is not None else np.random.default_rng()
        self.input_size = input_size
        self.hidden_size = hidden_size
        self.output_size = output_size
        self.weights_ih = rng.uniform(-1.0, 1.0, (hidden_size, input_size + 1))
        self.weights_ho = rng.uniform(-1.0, 1.0, (output_size, hidden_size + 1))

    def _hidden(self, aug_input: np.ndarray) -> np.ndarray:
        return self.weights_ih @ aug_input

    def forward(self, x: np.ndarray) -> np.ndarray:
        aug_input = augment(np.asarray(x, dtype=float))
        hidden = leaky_relu(self._hidden(aug_input))
        return self.weights_ho @ augment(hidden)

    def backward(self, x: np.ndarray, target: np.ndarray, learning_rate: float) -> float:
        """One SGD update on a single sample. Returns the squared error."""
        aug_input = augment(np.asarray(x, dtype=float))
        pre_hidden = self._hidden(aug_input)
        aug_hidden = augment(leaky_relu(pre_hidden))
        output = self.weights_ho @ aug_hidden

        output_delta = np.asarray(target, dtype=float) - output
        # bias column carries no error back to the hidden layer
        hidden_delta = (self.weights_ho[:, :-1].T @ output_delta) * leaky_relu_derivative(
            pre_hidden
        )

        self.weights_ho += learning_rate * np.outer(output_delta, aug_hidden)
        self.weights_ih += learning_rate * np.outer(hidden_delta, aug_input)
        return float(np.sum(output_delta ** 2))

    def train_batch(
        self,
        inputs: List[np.ndarray],
        targets: List[np.ndarray],
        learning_rate: float,
    ) -> float:
        """Averaged update over a batch. Returns the batch mean squared error."""
        if len(inputs) == 0 or len(inputs) != len(targets):
            raise PreconditionError("inputs and targets must be non-empty and equal length")

        update_ho = np.zeros_like(self.weights_ho)
        update_ih = np.zeros_like(self.weights_ih)
        total_error = 0.0

        for x, target in zip(inputs, targets):
            aug_input = augment(np.asarray(x, dtype=float))
            pre_hidden = self._hidden(aug_input)
            aug_hidden = augment(leaky_relu(pre_hidden))
            output = self.weights_ho @ aug_hidden

            output_delta = np.asarray(target, dtype=float) - output
            hidden_delta = (
                self.weights_ho[:, :-1].T @ output_delta
            ) * leaky_relu_derivative(pre_hidden)

            update_ho += np.outer(output_delta, aug_hidden)
            update_ih += np.outer(hidden_delta, aug_input)
            total_error += float(np.sum(output_delta ** 2))

        batch_size = len(inputs)
        self.weights_ho += update_ho * (learning_rate / batch_size)
        self.weights_ih += update_ih * (learning_rate / batch_size)

        mse = total_error / batch_size
        logger.debug("batch of %d: mse=%.6g", batch_size, mse)
        return mse

    # --- Scalar function interface ---

    def eval_one(self, x: float) -> float:
        return float(self.forward(np.array([x]))[0])

    def eval_many(self, xs: np.ndarray) -> np.ndarray:
        return np.array([self.eval_one(x) for x in np.asarray(xs, dtype=float)])
