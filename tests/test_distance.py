"""Tests for the Distance value type."""

import math

import pytest

from graphpaths import INF, BadAccessError, Distance, InfiniteValueAccess


class TestConstruction:
    """Tests for building finite and infinite distances."""

    def test_finite(self):
        """Test that an integer builds a finite distance."""
        d = Distance(42)
        assert not d.is_infinite()
        assert d.is_finite()
        assert d.value() == 42

    def test_finite_factory(self):
        """Test the explicit finite constructor."""
        assert Distance.finite(-7) == Distance(-7)

    def test_infinite(self):
        """Test the infinite factory and module constant."""
        inf = Distance.infinite()
        assert inf.is_infinite()
        assert INF.is_infinite()
        assert inf == INF

    def test_numpy_integer_accepted(self):
        """Test that numpy integers are normalized to int."""
        np = pytest.importorskip("numpy")
        d = Distance(np.int64(5))
        assert type(d.value()) is int
        assert d == 5

    @pytest.mark.parametrize("bad", [1.5, "3", None, True])
    def test_non_integer_rejected(self, bad):
        """Test that non-integer payloads raise TypeError."""
        with pytest.raises(TypeError):
            Distance(bad)

    def test_immutable(self):
        """Test that distances cannot be mutated."""
        d = Distance(1)
        with pytest.raises(AttributeError):
            d._value = 2


class TestValue:
    """Tests for value access."""

    def test_value_of_infinity_raises(self):
        """Test that reading infinity fails loudly."""
        with pytest.raises(InfiniteValueAccess):
            INF.value()

    def test_infinite_value_access_is_bad_access(self):
        """Test the error hierarchy."""
        with pytest.raises(BadAccessError):
            INF.value()
        with pytest.raises(LookupError):
            INF.value()

    def test_float_conversion(self):
        """Test float() maps infinity to math.inf."""
        assert float(Distance(3)) == 3.0
        assert float(INF) == math.inf


class TestEquality:
    """Tests for equality."""

    def test_distance_equality(self):
        """Test equality between distances."""
        assert Distance(10) != Distance(42)
        assert Distance(42) == Distance(42)
        assert Distance(10) != INF
        assert INF != Distance(10)

    def test_int_equality(self):
        """Test equality against plain ints on either side."""
        d = Distance(10)
        assert d == 10
        assert 10 == d
        assert d != 42
        assert INF != 0
        assert 0 != INF

    def test_unrelated_types(self):
        """Test that unrelated types never compare equal."""
        assert Distance(1) != "1"
        assert Distance(1) != 1.0

    def test_hash_consistent_with_eq(self):
        """Test hashing agrees with equality."""
        assert hash(Distance(5)) == hash(5)
        assert len({Distance(5), Distance(5), INF, Distance.infinite()}) == 2


class TestOrdering:
    """Tests for total ordering with infinity as maximum."""

    def test_infinity_is_maximum(self):
        """Test infinity compares greater than every finite value."""
        for d in (Distance(10), Distance(42), Distance(-(10**18)), Distance(10**30)):
            assert d < INF
            assert INF > d
        assert 0 < INF
        assert INF > 0

    def test_finite_ordering(self):
        """Test ordering of finite distances and ints."""
        assert Distance(10) < Distance(42)
        assert Distance(42) > Distance(10)
        assert 0 < Distance(10)
        assert Distance(10) > 0
        assert Distance(10) <= 10
        assert Distance(10) >= 10

    def test_infinity_not_less_than_itself(self):
        """Test infinity is equal, not less, than infinity."""
        assert not INF < INF
        assert INF <= INF
        assert INF >= INF

    def test_sorting(self):
        """Test sorting a mixed list."""
        values = [INF, Distance(3), Distance(-1), Distance(0)]
        assert sorted(values) == [Distance(-1), Distance(0), Distance(3), INF]
        assert min(values) == -1
        assert max(values) == INF


class TestSum:
    """Tests for addition."""

    def test_finite_sum(self):
        """Test exact integer sums."""
        d1, d2 = Distance(10), Distance(42)
        assert d1 + d2 == 52
        assert d2 + d1 == 52
        assert d1 + 42 == 52
        assert 42 + d1 == 52
        assert isinstance(42 + d1, Distance)

    def test_infinity_absorbs(self):
        """Test that infinity is absorbing in addition."""
        d = Distance(10)
        assert d + INF == INF
        assert INF + d == INF
        assert INF + 10 == INF
        assert 10 + INF == INF
        assert INF + INF == INF

    def test_infinity_plus_negative_stays_infinite(self):
        """Test that a negative weight cannot make infinity finite."""
        assert (INF + (-(10**9))).is_infinite()
        assert (INF + Distance(-5)).is_infinite()

    def test_no_overflow(self):
        """Test that large sums stay exact."""
        big = Distance(2**63 - 1)
        assert (big + 1).value() == 2**63

    def test_unsupported_operand(self):
        """Test adding a float raises TypeError."""
        with pytest.raises(TypeError):
            Distance(1) + 0.5


def test_repr_and_str():
    """Test textual forms."""
    assert repr(Distance(5)) == "Distance(5)"
    assert repr(INF) == "Distance.infinite()"
    assert str(Distance(-3)) == "-3"
    assert str(INF) == "inf"
