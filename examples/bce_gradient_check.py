"""Compares BinaryCrossEntropyLoss gradients against central finite differences.

Example:
  python examples/bce_gradient_check.py --activation=softmax --use_weights
"""
from absl import app
from absl import flags
from absl import logging
import mlx.core as mx
import numpy as np

from softxent.function.loss import BinaryCrossEntropyLoss

flags.DEFINE_string('activation', 'sigmoid', 'Registered activation applied to the pre-output.')
flags.DEFINE_integer('batch_size', 4, 'Number of examples (rows).')
flags.DEFINE_integer('num_units', 3, 'Number of output units (columns).')
flags.DEFINE_boolean('use_weights', False, 'Whether to use random per-unit weights.')
flags.DEFINE_boolean('use_mask', False, 'Whether to mask out the last example.')
flags.DEFINE_integer('seed', 0, 'Seed for the input generator.')
flags.DEFINE_float('epsilon', 1e-3, 'Step size of the finite differences.')
flags.DEFINE_float('tolerance', 1e-3, 'Largest accepted gradient error.')
FLAGS = flags.FLAGS


def to_mx(x):
    return mx.array(x, dtype=mx.float64)


def numerical_gradient(loss_fn, labels, pre_output, activation, mask, epsilon):
    grad = np.zeros_like(pre_output)
    for idx in np.ndindex(*pre_output.shape):
        plus, minus = pre_output.copy(), pre_output.copy()
        plus[idx] += epsilon
        minus[idx] -= epsilon
        grad[idx] = (loss_fn.compute_score(labels, to_mx(plus), activation, mask)
                     - loss_fn.compute_score(labels, to_mx(minus), activation, mask)) / (2 * epsilon)
    return grad


def main(_):
    # float64 is only available on the CPU device
    mx.set_default_device(mx.cpu)
    rng = np.random.default_rng(FLAGS.seed)
    shape = (FLAGS.batch_size, FLAGS.num_units)

    pre_output = rng.normal(size=shape)
    if FLAGS.activation == 'softmax':
        labels = np.eye(FLAGS.num_units)[rng.integers(0, FLAGS.num_units, FLAGS.batch_size)]
    else:
        labels = rng.integers(0, 2, size=shape).astype(np.float64)

    weights = to_mx(rng.uniform(0.5, 2.0, size=(1, FLAGS.num_units))) if FLAGS.use_weights else None
    mask = None
    if FLAGS.use_mask:
        mask = np.ones((FLAGS.batch_size, 1))
        mask[-1] = 0
        mask = to_mx(mask)

    loss_fn = BinaryCrossEntropyLoss(weights)
    labels_mx = to_mx(labels)
    score, grad = loss_fn.compute_gradient_and_score(labels_mx, to_mx(pre_output), FLAGS.activation, mask)
    expected = numerical_gradient(loss_fn, labels_mx, pre_output, FLAGS.activation, mask, FLAGS.epsilon)

    max_error = float(np.max(np.abs(np.array(grad) - expected)))
    logging.info('%r activation=%s score=%.6f', loss_fn, FLAGS.activation, score)
    logging.info('Max abs difference to finite differences: %.3e', max_error)
    if max_error > FLAGS.tolerance:
        logging.warning('Gradient check failed (max error %.3e)', max_error)


if __name__ == '__main__':
    app.run(main)
