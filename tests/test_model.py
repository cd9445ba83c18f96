import numpy as np
import pytest

from playground_nn import (EmptyBatch, InvalidTopology, NeuralNetwork, ShapeMismatch,
                           build, infer)

from conftest import W1, W2


@pytest.mark.parametrize("widths", [[2, 1], [3, 5, 2], [4, 4, 4, 4], [1, 7, 1]])
def test_build_produces_one_matrix_per_transition(widths, rng):
    net = build(widths, rng=rng)
    assert len(net.weight_matrices) == len(widths) - 1
    for i, shape in enumerate(net.shapes):
        assert shape == (widths[i] + 1, widths[i + 1])
    assert net.layer_widths == widths


def test_shapes_form_a_chain(rng):
    net = build([3, 6, 4, 2], rng=rng)
    for (_, cols), (rows, _) in zip(net.shapes, net.shapes[1:]):
        assert cols == rows - 1


@pytest.mark.parametrize("widths", [[], [3], [2, 0], [2, -3, 1], [2, 1.5], ["2", 1], None])
def test_build_rejects_invalid_topology(widths):
    with pytest.raises(InvalidTopology):
        build(widths)


def test_two_networks_get_different_weights():
    a = build([3, 2])
    b = build([3, 2])
    assert a.weight_matrices[0] != b.weight_matrices[0]


def test_seeded_builds_are_reproducible():
    a = build([3, 4, 2], rng=np.random.default_rng(42))
    b = build([3, 4, 2], rng=np.random.default_rng(42))
    assert a.weight_matrices == b.weight_matrices


def test_hand_computed_two_layer_output(fixed_network):
    outputs = infer(fixed_network, [[1.0, 2.0], [0.0, -1.0]])
    assert len(outputs) == 2
    np.testing.assert_allclose(outputs[0], [4.725], atol=1e-5)
    np.testing.assert_allclose(outputs[1], [-0.15], atol=1e-5)


def test_output_count_and_width(rng):
    net = build([5, 8, 3], rng=rng)
    batch = rng.random((7, 5))
    outputs = net.infer(batch)
    assert len(outputs) == 7
    assert all(len(o) == 3 for o in outputs)


def test_single_layer_is_affine_map(rng):
    net = build([4, 4], rng=rng)
    W = net.weight_matrices[0].to_array()
    x = rng.random(4)
    expected = W[-1] + W[:-1].T @ x
    np.testing.assert_allclose(net.infer([x])[0], expected)


def test_permuting_batch_permutes_outputs(rng):
    net = build([3, 5, 2], rng=rng)
    batch = rng.random((6, 3))
    perm = rng.permutation(6)
    out = net.forward(batch)
    out_perm = net.forward(batch[perm])
    np.testing.assert_allclose(out_perm, out[perm])


def test_network_is_affine(rng):
    net = build([3, 4, 2], rng=rng)
    x1 = rng.random((5, 3))
    x2 = rng.random((5, 3))
    c = 2.5
    bias = net.forward(np.zeros((5, 3)))
    lhs = net.forward(c * x1 + x2) - bias
    rhs = c * (net.forward(x1) - bias) + (net.forward(x2) - bias)
    np.testing.assert_allclose(lhs, rhs, atol=1e-10)


def test_zero_input_gives_bias_driven_output(fixed_network):
    # h = 第一層偏置 [0.1, 0.2, 0.3]，輸出 = 0.1 - 0.4 + 0.15 + 0.75
    out = fixed_network.infer([[0.0, 0.0]])
    np.testing.assert_allclose(out[0], [0.6], atol=1e-5)


def test_wrong_input_length_raises(fixed_network):
    with pytest.raises(ShapeMismatch):
        fixed_network.infer([[1.0, 2.0, 3.0]])
    with pytest.raises(ShapeMismatch):
        fixed_network.infer([[1.0, 2.0], [1.0]])


def test_empty_batch_raises(fixed_network):
    with pytest.raises(EmptyBatch):
        fixed_network.infer([])


def test_from_weights_rejects_broken_chain():
    with pytest.raises(InvalidTopology):
        NeuralNetwork.from_weights([W1, np.ones((3, 1))])


def test_weights_are_not_mutated_by_inference(fixed_network):
    before = [m.to_array() for m in fixed_network.weight_matrices]
    fixed_network.infer([[3.0, 4.0]])
    after = [m.to_array() for m in fixed_network.weight_matrices]
    for b, a in zip(before, after):
        np.testing.assert_array_equal(b, a)
    np.testing.assert_array_equal(before[1], W2)


def test_summary_lists_layers(fixed_network):
    text = fixed_network.summary()
    assert "2 -> 3 -> 1" in text
    assert "(3, 3)" in text and "(4, 1)" in text
