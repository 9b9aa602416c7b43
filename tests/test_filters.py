import pytest

from gamecore.filters import Filter


def _identity3():
    return Filter(3, 3, [0, 0, 0, 0, 1, 0, 0, 0, 0])


@pytest.mark.parametrize(
    "neighbours, preset",
    [
        (1, Filter.gaussian1),
        (2, Filter.gaussian2),
        (3, Filter.gaussian3),
        (4, Filter.gaussian4),
    ],
)
def test_gaussian_matches_presets(neighbours, preset):
    assert Filter.gaussian(neighbours) == preset()


def test_gaussian_zero_neighbours():
    assert Filter.gaussian(0).matrix == [2.0]


def test_gaussian_is_symmetric():
    kernel = Filter.gaussian(3)
    assert kernel.matrix == kernel.matrix[::-1]
    assert kernel[0, 1] == kernel[1, 0]


def test_gaussian_negative_raises():
    with pytest.raises(ValueError):
        Filter.gaussian(-1)


def test_even_dimensions_raise():
    with pytest.raises(ValueError):
        Filter(2, 3)


def test_wrong_weight_count_raises():
    with pytest.raises(ValueError):
        Filter(3, 3, [1, 2, 3])


def test_normalize_sums_to_one():
    kernel = Filter.sobel().normalize()
    assert sum(abs(v) for v in kernel.matrix) == pytest.approx(1.0)


def test_normalize_keeps_zero_filter():
    kernel = Filter(3, 3)
    assert kernel.normalize() is kernel
    assert kernel.matrix == [0.0] * 9


def test_identity_filter_keeps_data():
    data = [float(i * i) for i in range(20)]
    assert _identity3().apply(data, 4, 5) == data


def test_lowpass_keeps_constant_data():
    data = [7.5] * 30
    result = Filter.lowpass().apply(data, 5, 6)
    assert result == pytest.approx(data)


def test_apply_does_not_modify_input():
    data = [float(i) for i in range(9)]
    copy = list(data)
    Filter.gaussian1().apply(data, 3, 3)
    assert data == copy


def test_edge_detection_cancels_on_constant_centre():
    result = Filter.edge_detection_upper_left().apply([3.0] * 9, 3, 3)
    assert result[4] == 0.0


def test_stride_leaves_other_channels_alone():
    # odd columns hold a constant channel, even columns vary
    data = [5.0 if i % 2 else float(i) for i in range(16)]
    result = Filter.lowpass().apply(data, 4, 4, offset=1, stride=2)
    for index, (before, after) in enumerate(zip(data, result)):
        if index % 2 == 0:
            assert after == before
        else:
            assert after == pytest.approx(5.0)


def test_apply_wrong_length_raises():
    with pytest.raises(ValueError):
        Filter.lowpass().apply([1.0, 2.0], 2, 2)


def test_apply_bad_offset_raises():
    with pytest.raises(ValueError):
        Filter.lowpass().apply([1.0] * 4, 2, 2, offset=2, stride=2)


def test_parse_round_trip():
    assert Filter.parse("1 3 1 2 3") == Filter(1, 3, [1, 2, 3])


def test_parse_too_few_weights_raises():
    with pytest.raises(ValueError):
        Filter.parse("3 3 1 2 3")


def test_str_format():
    assert str(Filter(1, 3, [1, 2, 3])) == "{1, 2, 3}\n"


def test_presets_are_independent_copies():
    first = Filter.lowpass().normalize()
    assert Filter.lowpass().matrix == [1.0] * 9
    assert first.matrix != Filter.lowpass().matrix