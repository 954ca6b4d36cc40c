import pytest

from pdfcore.color.calibrated import CalGray, CalRgb
from pdfcore.color.value import ColorValue
from pdfcore.errors import ColorError

WHITE = [0.9505, 1.0, 1.089]


def test_cal_gray_reads_entries():
    space = CalGray.from_dict(
        {"Gamma": 2.2, "WhitePoint": WHITE, "BlackPoint": [0, 0, 0]}
    )
    assert space.gamma == 2.2
    assert space.white_point == tuple(WHITE)
    assert space.black_point == (0.0, 0.0, 0.0)


def test_cal_gray_defaults():
    space = CalGray.from_dict({"WhitePoint": [1, 1, 1]})
    assert space.gamma == 1.0
    assert space.number_of_components() == 1
    assert space.default_value().values == (0.0,)


def test_cal_gray_requires_white_point():
    with pytest.raises(ColorError, match="WhitePoint is required"):
        CalGray.from_dict({"Gamma": 1.0})


@pytest.mark.parametrize("white", [[1, 1], "abc", [1, "x", 1], 5])
def test_cal_gray_rejects_bad_white_point(white):
    with pytest.raises(ColorError):
        CalGray.from_dict({"WhitePoint": white})


def test_cal_gray_rejects_bad_black_point():
    with pytest.raises(ColorError):
        CalGray.from_dict({"WhitePoint": WHITE, "BlackPoint": [0, 0]})


def test_cal_gray_rejects_non_number_gamma():
    with pytest.raises(ColorError):
        CalGray.from_dict({"WhitePoint": WHITE, "Gamma": "x"})


def test_cal_gray_zero_is_black():
    rgb = CalGray.from_dict({"WhitePoint": WHITE}).rgb(ColorValue([0.0]))
    assert (rgb.r, rgb.g, rgb.b) == (0.0, 0.0, 0.0)


def test_cal_gray_is_linear_with_unit_gamma():
    space = CalGray.from_dict({"WhitePoint": WHITE})
    full = space.rgb(ColorValue([1.0]))
    half = space.rgb(ColorValue([0.5]))
    assert half.r == pytest.approx(full.r / 2)
    assert half.g == pytest.approx(full.g / 2)
    assert half.b == pytest.approx(full.b / 2)


def test_cal_gray_gamma_applies_to_level():
    linear = CalGray.from_dict({"WhitePoint": WHITE})
    squared = CalGray.from_dict({"WhitePoint": WHITE, "Gamma": 2})
    assert squared.rgb(ColorValue([0.5])).g == pytest.approx(
        linear.rgb(ColorValue([0.25])).g
    )


def test_cal_rgb_reads_entries():
    matrix = [0.4124, 0.2126, 0.0193, 0.3576, 0.7152, 0.1192, 0.1805, 0.0722, 0.9505]
    space = CalRgb.from_dict(
        {"WhitePoint": WHITE, "Gamma": [1.8, 1.8, 1.8], "Matrix": matrix}
    )
    assert space.matrix == tuple(matrix)
    assert space.gamma == (1.8, 1.8, 1.8)
    assert space.white_point == tuple(WHITE)


def test_cal_rgb_defaults():
    space = CalRgb.from_dict({"WhitePoint": WHITE})
    assert space.gamma == (1.0, 1.0, 1.0)
    assert space.number_of_components() == 3
    assert space.default_value().values == (0.0, 0.0, 0.0)


def test_cal_rgb_requires_white_point():
    with pytest.raises(ColorError, match="WhitePoint is required"):
        CalRgb.from_dict({"Gamma": [1, 1, 1]})


def test_cal_rgb_rejects_short_matrix():
    with pytest.raises(ColorError):
        CalRgb.from_dict({"WhitePoint": WHITE, "Matrix": [1, 0, 0]})


def test_cal_rgb_rejects_short_gamma():
    with pytest.raises(ColorError, match="third"):
        CalRgb.from_dict({"WhitePoint": WHITE, "Gamma": [1, 1]})


def test_cal_rgb_rejects_non_array_gamma():
    with pytest.raises(ColorError):
        CalRgb.from_dict({"WhitePoint": WHITE, "Gamma": 2.2})


def test_cal_rgb_needs_three_values():
    with pytest.raises(ColorError):
        CalRgb.from_dict({"WhitePoint": WHITE}).rgb(ColorValue([0.1]))


def test_identity_cal_rgb_matches_cal_gray_for_neutral_input():
    gray = CalGray.from_dict({"WhitePoint": [1, 1, 1]})
    rgb_space = CalRgb.from_dict({"WhitePoint": [1, 1, 1]})
    for level in (0.0, 0.3, 0.7, 1.0):
        a = gray.rgb(ColorValue([level]))
        b = rgb_space.rgb(ColorValue([level, level, level]))
        assert a.r == pytest.approx(b.r)
        assert a.g == pytest.approx(b.g)
        assert a.b == pytest.approx(b.b)


def test_cal_rgb_is_additive_with_unit_gamma():
    space = CalRgb.from_dict({"WhitePoint": WHITE})
    red = space.rgb(ColorValue([0.6, 0.0, 0.0]))
    green = space.rgb(ColorValue([0.0, 0.6, 0.0]))
    both = space.rgb(ColorValue([0.6, 0.6, 0.0]))
    assert both.r == pytest.approx(red.r + green.r)
    assert both.b == pytest.approx(red.b + green.b)


def test_negative_level_with_fractional_gamma_gives_nan():
    space = CalGray.from_dict({"WhitePoint": WHITE, "Gamma": 2.2})
    result = space.rgb(ColorValue([-0.5]))
    assert str(result.r) == "nan"
    assert str(result.g) == "nan"
    assert str(result.b) == "nan"