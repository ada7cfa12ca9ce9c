"""Test module for mosaico.scale

The tests are run using pytest.
"""

import pytest

from mosaico.scale import MoLinearScale, Tick, TickParams


class TestMoLinearScale:
    """Test class for the linear scale."""

    def test_scale_and_invert(self):
        """Values map linearly and back."""
        scale = MoLinearScale((0, 10), (0, 100))
        assert scale.scale(5) == 50
        assert scale.invert(50) == 5

    def test_inverted_range(self):
        """A range running downwards, as used for y axes."""
        scale = MoLinearScale((0, 12), (220, 20))
        assert scale.scale(0) == 220
        assert scale.scale(12) == 20
        assert scale.scale(6) == pytest.approx(120)

    def test_degenerate_domain_and_range(self):
        """Degenerate domain maps to r0, degenerate range inverts to d0."""
        assert MoLinearScale((3, 3), (0, 100)).scale(10) == 0
        assert MoLinearScale((0, 10), (5, 5)).invert(7) == 0

    @pytest.mark.parametrize(
        "start, stop, count, expected",
        [(0, 100, 10, 10), (0, 10, 10, 1), (0, 1, 5, -5), (0, 1, 10, -10), (0, 7, 2, 5), (0, 300, 5, 50)],
    )
    def test_tick_increment(self, start, stop, count, expected):
        """1-2-5 rule, negative values encode inverse steps."""
        assert MoLinearScale.tick_increment(start, stop, count) == expected

    def test_ticks_default(self):
        """Default asks for about ten ticks."""
        ticks = MoLinearScale((0, 10), (0, 100)).ticks()
        assert [t.value for t in ticks] == list(range(11))
        assert ticks[0] == Tick(0, "0.0")

    def test_ticks_fractional(self):
        """Fractional steps avoid accumulating errors."""
        ticks = MoLinearScale((0, 1), (0, 100)).ticks(TickParams(desired_count=5, format=lambda v: f"{v:g}"))
        assert [t.formatted_value for t in ticks] == ["0", "0.2", "0.4", "0.6", "0.8", "1"]

    def test_ticks_reversed_domain(self):
        """Ticks ascend even for a reversed domain."""
        ticks = MoLinearScale((10, 0), (0, 100)).ticks(TickParams(desired_count=2))
        assert [t.value for t in ticks] == [0, 5, 10]

    def test_ticks_bounds(self):
        """Start and end override the domain."""
        ticks = MoLinearScale((0, 10), (0, 100)).ticks(TickParams(start=2, end=4, desired_count=2))
        assert [t.value for t in ticks] == [2, 3, 4]

    def test_ticks_edge_cases(self):
        """No ticks for a non-positive count, a single tick for a single value."""
        scale = MoLinearScale((5, 5), (0, 100))
        assert not scale.ticks(TickParams(desired_count=0))
        assert scale.ticks() == [Tick(5, "5.0")]

    def test_tick_params_dict(self):
        """The formatter is not part of the dictionary."""
        params = TickParams(start=1, end=2, desired_count=4)
        assert params.to_dict() == {"start": 1, "end": 2, "desired_count": 4}
        assert TickParams.from_dict(params.to_dict()) == params
