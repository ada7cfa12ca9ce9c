"""Test module for mosaico.sector

The tests are run using pytest.
They check the command sequence of every sector variant, the validation rules
and the drawn geometry (filled areas measured with PathMeasure).
"""

import logging
import math

import pytest

from mosaico.common import InvalidArgumentError
from mosaico.geom import MoPoint
from mosaico.path import MoPath
from mosaico.path_measure import PathMeasure
from mosaico.sector import MoSector, SectorParams, SectorVariant


def draw(precision=None, **kwargs) -> MoPath:
    """Draw a sector built from _kwargs_ into a new path."""
    path = MoPath(precision)
    MoSector(**kwargs).draw(path)
    return path


def letters(path: MoPath) -> list:
    """Command letters of _path_."""
    return [command.cmd for command in path.commands]


def arcs(path: MoPath) -> list:
    """Arguments of all arc commands of _path_."""
    return [command.args for command in path.commands if command.cmd in "Aa"]


###############################################################################
# SectorParams
###############################################################################


class TestSectorParams:
    """Tests for parameter handling."""

    def test_defaults(self):
        """Only angles and outer radius are required."""
        params = SectorParams(0, 90, 100)
        assert params.origin == MoPoint(0, 0)
        assert params.angle_span == 90
        assert params.padded_angles() == (0, 90)

    def test_padded_angles_split_pad(self):
        """Half of the pad is removed at each end."""
        assert SectorParams(0, 90, 100, pad_angle=10).padded_angles() == (5, 85)

    def test_padded_angles_reversed(self):
        """Reversed angles are swapped before padding."""
        assert SectorParams(90, 0, 100, pad_angle=10).padded_angles() == (5, 85)

    def test_padded_angles_pad_larger_than_span(self):
        """An oversized pad collapses the slice onto its middle."""
        assert SectorParams(0, 10, 100, pad_angle=50).padded_angles() == (5, 5)

    def test_dict_conversion(self):
        """Parameters survive a dictionary round trip."""
        params = SectorParams(10, 80, 100, 40, 5, 2, 1, MoPoint(3, 4))
        data = params.to_dict()
        assert data["center"] == {"x": 3, "y": 4}
        assert SectorParams.from_dict(data) == params

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"outer_radius": -1}, "negative outer_radius"),
            ({"outer_radius": 10, "inner_radius": -1}, "negative inner_radius"),
            ({"outer_radius": 10, "outer_corner_radius": -1}, "negative outer_corner_radius"),
            ({"outer_radius": 10, "inner_corner_radius": 2}, "inner_corner_radius requires inner_radius"),
            ({"outer_radius": 10, "inner_radius": 20}, "greater than outer_radius"),
        ],
    )
    def test_validate(self, kwargs, message):
        """Invalid radii are rejected."""
        with pytest.raises(InvalidArgumentError, match=message):
            SectorParams(0, 90, **kwargs).validate()


###############################################################################
# Variant selection
###############################################################################


class TestSectorVariant:
    """Tests for the variant chosen from the parameters."""

    @pytest.mark.parametrize(
        "kwargs, variant",
        [
            ({"end_angle": 360, "outer_radius": 10}, SectorVariant.FULL),
            ({"end_angle": 360, "outer_radius": 10, "inner_radius": 5}, SectorVariant.FULL),
            ({"end_angle": 90, "outer_radius": 10}, SectorVariant.SLICE),
            ({"end_angle": 90, "outer_radius": 10, "inner_radius": 0}, SectorVariant.SLICE),
            ({"end_angle": 90, "outer_radius": 10, "outer_corner_radius": 2}, SectorVariant.ROUNDED_SLICE),
            ({"end_angle": 90, "outer_radius": 10, "inner_radius": 5}, SectorVariant.ANNULAR),
            (
                {"end_angle": 90, "outer_radius": 10, "inner_radius": 5, "inner_corner_radius": 1},
                SectorVariant.ROUNDED_ANNULAR,
            ),
            (
                {"end_angle": 90, "outer_radius": 10, "inner_radius": 5, "outer_corner_radius": 0},
                SectorVariant.ANNULAR,
            ),
        ],
    )
    def test_variant(self, kwargs, variant):
        """First matching rule wins, zero radii count as not set."""
        assert MoSector(start_angle=0, **kwargs).variant is variant

    def test_params_and_kwargs_exclusive(self):
        """Either a params object or keyword arguments."""
        with pytest.raises(TypeError):
            MoSector(SectorParams(0, 90, 10), outer_radius=5)


###############################################################################
# Drawing
###############################################################################


class TestSectorDrawing:
    """Tests for the emitted commands of each variant."""

    def test_full_circle(self):
        """A full turn draws a circle starting at its leftmost point."""
        path = draw(start_angle=0, end_angle=360, outer_radius=100)
        assert str(path) == "M-100,0a100,100,0,1,1,200,0a100,100,0,1,1,-200,0Z"

    def test_full_annulus_opposite_winding(self):
        """The inner circle of a full annulus is wound the other way."""
        path = draw(start_angle=0, end_angle=360, outer_radius=100, inner_radius=50)
        assert str(path) == (
            "M-100,0a100,100,0,1,1,200,0a100,100,0,1,1,-200,0" "M-50,0a50,50,0,1,0,100,0a50,50,0,1,0,-100,0Z"
        )

    def test_full_circle_with_center(self):
        """The center moves the circle."""
        path = draw(start_angle=-30, end_angle=330, outer_radius=10, center=MoPoint(50, 60))
        assert str(path) == "M40,60a10,10,0,1,1,20,0a10,10,0,1,1,-20,0Z"

    def test_slice(self):
        """A plain slice: center, line out, arc, close."""
        path = draw(3, start_angle=0, end_angle=90, outer_radius=100)
        assert str(path) == "M0,0L0,-100A100,100,0,0,1,100,0Z"

    def test_slice_large_arc(self):
        """A slice wider than 180 degrees sets the large-arc flag."""
        path = draw(3, start_angle=0, end_angle=270, outer_radius=100)
        assert str(path) == "M0,0L0,-100A100,100,0,1,1,-100,0Z"

    def test_slice_reversed_angles(self):
        """Swapped angles draw the same slice."""
        forward = draw(3, start_angle=0, end_angle=90, outer_radius=100)
        backward = draw(3, start_angle=90, end_angle=0, outer_radius=100)
        assert str(forward) == str(backward)

    def test_slice_padded(self):
        """The pad angle insets both edges."""
        path = draw(start_angle=0, end_angle=90, outer_radius=100, pad_angle=10)
        line, arc = path.commands[1], path.commands[2]
        expected_start = (100 * math.sin(math.radians(5)), -100 * math.cos(math.radians(5)))
        expected_end = (100 * math.sin(math.radians(85)), -100 * math.cos(math.radians(85)))
        assert line.args == pytest.approx(expected_start)
        assert arc.args[5:] == pytest.approx(expected_end)

    def test_annular(self):
        """A ring segment: inner start, outer arc clockwise, inner arc back."""
        path = draw(3, start_angle=0, end_angle=90, outer_radius=100, inner_radius=50)
        assert str(path) == "M0,-50L0,-100A100,100,0,0,1,100,0L50,0A50,50,0,0,0,0,-50Z"

    def test_rounded_slice(self):
        """Outer corners of a slice are rounded with fillet arcs."""
        path = draw(start_angle=0, end_angle=90, outer_radius=100, outer_corner_radius=10)
        assert letters(path) == ["M", "L", "A", "A", "A", "Z"]
        assert [a[0] for a in arcs(path)] == [10, 100, 10]
        assert path.commands[1].args == pytest.approx((0, -90), abs=1e-9)
        assert arcs(path)[-1][5:] == pytest.approx((90, 0), abs=1e-9)

        rounding = math.radians(360 * 10 / (2 * math.pi * 100))
        assert arcs(path)[0][5:] == pytest.approx((100 * math.sin(rounding), -100 * math.cos(rounding)))
        assert arcs(path)[1][3] is False

    def test_rounded_slice_corner_limited_by_radius(self):
        """The corner radius is at most half the outer radius."""
        path = draw(start_angle=0, end_angle=180, outer_radius=100, outer_corner_radius=80)
        assert arcs(path)[0][0] == 50

    def test_rounded_slice_corner_fitted_to_span(self):
        """A narrow slice shrinks the corner radius so both fillets fit."""
        path = draw(start_angle=0, end_angle=10, outer_radius=100, outer_corner_radius=40)
        assert arcs(path)[0][0] == pytest.approx(10 / 360 * 100 * math.pi)

    def test_rounded_annular(self):
        """All four corners of a ring segment are rounded."""
        path = draw(
            start_angle=0,
            end_angle=90,
            outer_radius=100,
            inner_radius=50,
            outer_corner_radius=10,
            inner_corner_radius=5,
        )
        assert letters(path) == ["M", "A", "A", "A", "L", "A", "A", "A", "Z"]
        radii = [a[0] for a in arcs(path)]
        assert radii == [10, 100, 10, 5, 50, 5]
        sweeps = [a[4] for a in arcs(path)]
        assert sweeps == [True, True, True, True, False, True]

        assert path.commands[0].args == pytest.approx((0, -90), abs=1e-9)
        assert path.commands[4].args == pytest.approx((55, 0), abs=1e-9)
        assert arcs(path)[-1][5:] == pytest.approx((0, -55), abs=1e-9)

        inner_rounding = math.radians(360 * 5 / (2 * math.pi * 50))
        assert arcs(path)[4][5:] == pytest.approx((50 * math.sin(inner_rounding), -50 * math.cos(inner_rounding)))

    def test_rounded_annular_outer_corners_only(self):
        """Without inner corner radius the inner corners stay sharp."""
        path = draw(start_angle=0, end_angle=90, outer_radius=100, inner_radius=50, outer_corner_radius=10)
        assert letters(path) == ["M", "A", "A", "A", "L", "A", "Z"]
        assert path.commands[4].args == pytest.approx((50, 0), abs=1e-9)
        assert arcs(path)[-1][5:] == pytest.approx((0, -50), abs=1e-9)

    def test_rounded_annular_inner_corners_only(self):
        """Without outer corner radius the outer corners stay sharp."""
        path = draw(start_angle=0, end_angle=90, outer_radius=100, inner_radius=50, inner_corner_radius=5)
        assert letters(path) == ["M", "A", "L", "A", "A", "A", "Z"]
        assert path.commands[0].args == pytest.approx((0, -100), abs=1e-9)

    def test_rounded_annular_corners_fitted_to_span(self):
        """A narrow ring segment shrinks both corner radii so the fillets fit."""
        path = draw(
            start_angle=0,
            end_angle=10,
            outer_radius=100,
            inner_radius=50,
            outer_corner_radius=20,
            inner_corner_radius=20,
        )
        radii = [a[0] for a in arcs(path)]
        assert radii[0] == pytest.approx(10 / 360 * 100 * math.pi)
        assert radii[2] == pytest.approx(10 / 360 * 100 * math.pi)
        assert radii[3] == pytest.approx(10 / 360 * 50 * math.pi)
        assert radii[5] == pytest.approx(10 / 360 * 50 * math.pi)

    def test_rounded_annular_large_arc(self):
        """A wide rounded ring segment sets the large-arc flag on both main arcs."""
        path = draw(
            start_angle=0,
            end_angle=270,
            outer_radius=100,
            inner_radius=50,
            outer_corner_radius=10,
            inner_corner_radius=5,
        )
        main_arcs = [a for a in arcs(path) if a[0] in (100, 50)]
        assert len(main_arcs) == 2
        assert all(a[3] is True for a in main_arcs)

    def test_rounded_slice_large_arc(self):
        """A wide rounded slice sets the large-arc flag on its main arc."""
        path = draw(start_angle=0, end_angle=270, outer_radius=100, outer_corner_radius=10)
        assert arcs(path)[1][0] == 100
        assert arcs(path)[1][3] is True

    def test_rounded_annular_corner_limited_by_ring_width(self):
        """Corner radii are at most half the ring width."""
        path = draw(start_angle=0, end_angle=180, outer_radius=100, inner_radius=80, outer_corner_radius=50)
        assert arcs(path)[0][0] == 10

    def test_draw_is_repeatable(self):
        """Drawing twice appends the same commands twice."""
        sector = MoSector(start_angle=0, end_angle=90, outer_radius=100, inner_radius=50)
        once = sector.to_path_string(3)
        path = MoPath(3)
        sector.draw(path)
        sector.draw(path)
        assert str(path) == once + once

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"outer_radius": -1},
            {"outer_radius": 10, "inner_corner_radius": 2},
            {"outer_radius": 10, "inner_radius": 20},
        ],
    )
    def test_invalid_params_emit_nothing(self, kwargs):
        """Validation happens before the first command."""
        path = MoPath()
        path.move_to(1, 2)
        with pytest.raises(InvalidArgumentError):
            MoSector(start_angle=0, end_angle=90, **kwargs).draw(path)
        assert str(path) == "M1,2"

    def test_corner_fitting_is_logged(self, caplog):
        """Shrinking a corner radius is reported at debug level."""
        with caplog.at_level(logging.DEBUG, logger="mosaico.sector"):
            draw(start_angle=0, end_angle=10, outer_radius=100, outer_corner_radius=40)
        assert "shrunk" in caplog.text


###############################################################################
# Geometry
###############################################################################


class TestSectorGeometry:
    """Filled areas of the drawn sectors."""

    def test_full_circle_area(self):
        """Full circle area."""
        area = PathMeasure.area(MoSector(start_angle=0, end_angle=360, outer_radius=100).to_path_string())
        assert area == pytest.approx(math.pi * 100**2, rel=1e-3)

    def test_full_annulus_area(self):
        """The inner circle cuts a hole."""
        sector = MoSector(start_angle=0, end_angle=360, outer_radius=100, inner_radius=50)
        assert PathMeasure.area(sector.to_path_string()) == pytest.approx(math.pi * (100**2 - 50**2), rel=1e-3)

    @pytest.mark.parametrize("start, end", [(0, 90), (30, 200), (-45, 45)])
    def test_annular_sector_area(self, start, end):
        """Ring segment area is the matching part of the annulus."""
        sector = MoSector(start_angle=start, end_angle=end, outer_radius=100, inner_radius=50)
        expected = math.pi * (100**2 - 50**2) * (end - start) / 360
        assert PathMeasure.area(sector.to_path_string()) == pytest.approx(expected, rel=1e-3)

    def test_slice_area(self):
        """Pie slice area."""
        sector = MoSector(start_angle=0, end_angle=90, outer_radius=100)
        assert PathMeasure.area(sector.to_path_string()) == pytest.approx(math.pi * 100**2 / 4, rel=1e-3)

    def test_rounded_corners_remove_area(self):
        """Rounding the corners removes a little area."""
        sharp = MoSector(start_angle=0, end_angle=90, outer_radius=100, inner_radius=50)
        rounded = MoSector(
            start_angle=0, end_angle=90, outer_radius=100, inner_radius=50, outer_corner_radius=10, inner_corner_radius=5
        )
        sharp_area = PathMeasure.area(sharp.to_path_string())
        rounded_area = PathMeasure.area(rounded.to_path_string())
        assert 0.9 * sharp_area < rounded_area < sharp_area

    def test_bounding_box(self):
        """The slice stays inside its quarter."""
        sector = MoSector(start_angle=0, end_angle=90, outer_radius=100, center=MoPoint(10, 10))
        box = PathMeasure.bounding_box(sector.to_path_string())
        assert box.extent == pytest.approx((10, -90, 110, 10), abs=1e-6)
