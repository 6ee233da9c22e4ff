"""Tests for Length, Weight and Area."""

from __future__ import annotations

import math

import pytest

from sailcalc_app.models import Area, Length, Weight


class TestLength:
    def test_conversions_to_meter(self):
        assert Length.from_foot(1.0).to_meter() == pytest.approx(0.3048)
        assert Length.from_inch(1.0).to_meter() == pytest.approx(0.0254)
        assert Length.from_millimeter(1.0).to_meter() == pytest.approx(0.001)
        assert Length.from_meter(1.0).to_meter() == 1.0

    @pytest.mark.parametrize(
        "make, read",
        [
            (Length.from_meter, Length.to_meter),
            (Length.from_millimeter, Length.to_millimeter),
            (Length.from_inch, Length.to_inch),
            (Length.from_foot, Length.to_foot),
        ],
    )
    def test_roundtrip(self, make, read):
        for x in (0.0, 1.0, 12.5, 304.8, 1e6):
            assert read(make(x)) == pytest.approx(x)

    def test_addition(self):
        loa = Length.from_foot(15.0) + Length.from_inch(4.0)
        assert loa.to_millimeter() == pytest.approx(4572.0 + 101.6)

    def test_foot_inch(self):
        assert Length.from_foot_inch(15.0, 4.0) == Length.from_foot(15.0) + Length.from_inch(4.0)
        assert Length.from_foot_inch(1.0, 1.0).to_millimeter() == pytest.approx(330.2)
        assert Length.from_foot_inch(0.0, 1.0).to_inch() == pytest.approx(1.0)

    def test_division_is_dimensionless_quotient(self):
        ratio = Length.from_foot(40.0) / Length.from_foot(10.0)
        assert isinstance(ratio, Length)
        assert ratio.to_meter() == pytest.approx(4.0)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Length.from_meter(1.0) / Length.from_meter(0.0)

    def test_ordering(self):
        assert Length.from_foot(1.0) < Length.from_meter(1.0)
        assert max(Length.from_inch(40.0), Length.from_foot(3.0)) == Length.from_inch(40.0)

    def test_immutable(self):
        length = Length.from_meter(2.0)
        with pytest.raises(AttributeError):
            length.value = 3.0  # type: ignore[misc]


class TestWeight:
    def test_conversions_to_kilogram(self):
        assert Weight.from_long_ton(1.0).to_kilogram() == pytest.approx(1016.05)
        assert Weight.from_short_ton(1.0).to_kilogram() == pytest.approx(907.185)
        assert Weight.from_gram(1000.0).to_kilogram() == pytest.approx(1.0)
        assert Weight.from_kilogram(1.0).to_pound() == pytest.approx(2.20462)
        assert Weight.from_pound(2.20462).to_kilogram() == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "make, read",
        [
            (Weight.from_kilogram, Weight.to_kilogram),
            (Weight.from_gram, Weight.to_gram),
            (Weight.from_pound, Weight.to_pound),
            (Weight.from_long_ton, Weight.to_long_ton),
            (Weight.from_short_ton, Weight.to_short_ton),
        ],
    )
    def test_roundtrip(self, make, read):
        for x in (0.0, 1.0, 80.0, 15680.0):
            assert read(make(x)) == pytest.approx(x)

    def test_long_ton_is_2240_pounds(self):
        assert Weight.from_pound(2240.0).to_long_ton() == pytest.approx(1.0, rel=1e-5)

    def test_addition(self):
        total = Weight.from_kilogram(80.0) + Weight.from_gram(500.0)
        assert total.to_kilogram() == pytest.approx(80.5)


class TestArea:
    def test_square_foot_uses_squared_length_factor(self):
        assert Area.from_foot2(1.0).to_meter2() == pytest.approx(0.3048 ** 2)
        assert Area.from_inch2(144.0).to_foot2() == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "make, read",
        [
            (Area.from_meter2, Area.to_meter2),
            (Area.from_foot2, Area.to_foot2),
            (Area.from_inch2, Area.to_inch2),
        ],
    )
    def test_roundtrip(self, make, read):
        for x in (0.0, 6.0, 704.0):
            assert read(make(x)) == pytest.approx(x)


class TestDimensionSafety:
    def test_cross_dimension_addition_rejected(self):
        with pytest.raises(TypeError):
            Length.from_meter(1.0) + Weight.from_kilogram(1.0)  # type: ignore[operator]
        with pytest.raises(TypeError):
            Area.from_meter2(1.0) + Length.from_meter(1.0)  # type: ignore[operator]

    def test_cross_dimension_division_rejected(self):
        with pytest.raises(TypeError):
            Length.from_meter(1.0) / Weight.from_kilogram(1.0)  # type: ignore[operator]
        with pytest.raises(TypeError):
            Area.from_meter2(1.0) / Length.from_meter(1.0)  # type: ignore[operator]

    def test_plain_numbers_rejected(self):
        with pytest.raises(TypeError):
            Length.from_meter(1.0) + 1.0  # type: ignore[operator]
        with pytest.raises(TypeError):
            2.0 / Weight.from_kilogram(1.0)  # type: ignore[operator]

    def test_equal_magnitudes_of_different_dimensions_differ(self):
        assert Length.from_meter(1.0) != Weight.from_kilogram(1.0)

    def test_ordering_across_dimensions_rejected(self):
        with pytest.raises(TypeError):
            Length.from_meter(1.0) < Area.from_meter2(2.0)  # type: ignore[operator]


class TestFiniteness:
    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValueError):
            Length.from_meter(bad)
        with pytest.raises(ValueError):
            Weight.from_kilogram(bad)
        with pytest.raises(ValueError):
            Area.from_meter2(bad)

    def test_overflow_rejected(self):
        with pytest.raises(ValueError):
            Length.from_meter(1e308) + Length.from_meter(1e308)
