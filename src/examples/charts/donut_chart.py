"""Creates a SVG file with a donut chart of rounded ring segments
and a bar chart with rounded bars next to it.
"""

from mosaico.geom import MoBox, MoPoint
from mosaico.page import MoSvgPage
from mosaico.pie import MoPie
from mosaico.rectangle import MoRectangle
from mosaico.scale import MoLinearScale, TickParams
from mosaico.sector import MoSector

OUTPUT_FILE = "data/output/example/charts/donut_chart.svg"

DATA = [12.0, 7.5, 4.0, 9.0, 2.5]
COLORS = ["#4e79a7", "#f28e2b", "#e15759", "#76b7b2", "#59a14f"]

# sectors are drawn around the origin and moved into place on the page
DONUT_PLACEMENT = [1, 0, 0, 1, 120, 120]
OUTER_RADIUS = 100
INNER_RADIUS = 60
PAD_ANGLE = 2  # degrees between segments


def main(output_filename: str = OUTPUT_FILE):
    """Lay out DATA as a donut and as bars, then save the page."""

    page = MoSvgPage.create_page_for_box(MoBox(0, 0, 480, 240), scale=1.0)

    # donut: angles from the pie layout, largest value first
    arcs = MoPie(pad_angle=PAD_ANGLE).sort(lambda a, b: (b > a) - (b < a))(DATA)
    for arc in arcs:
        sector = MoSector(
            start_angle=arc.start_angle,
            end_angle=arc.end_angle,
            outer_radius=OUTER_RADIUS,
            inner_radius=INNER_RADIUS,
            outer_corner_radius=6,
            inner_corner_radius=3,
            pad_angle=arc.pad_angle,
        )
        page.add_shape(sector, precision=3, affine_trafo=DONUT_PLACEMENT, fill=COLORS[arc.index], stroke="none")

    # bars: heights from a linear scale, baseline at y=220
    y_scale = MoLinearScale((0, max(DATA)), (220, 20))
    bar_width = 30
    for index, value in enumerate(DATA):
        height = y_scale.scale(0) - y_scale.scale(value)
        bar = MoRectangle(
            bar_width,
            height,
            center=MoPoint(270 + index * 40 + bar_width / 2, 220 - height / 2),
            top_radius=4,
        )
        page.add_shape(bar, precision=3, fill=COLORS[index], stroke="none")

    # axis ticks as thin bars
    for tick in y_scale.ticks(TickParams(desired_count=5, format=lambda v: f"{v:g}")):
        y = y_scale.scale(tick.value)
        page.add_shape(MoRectangle(6, 0.5, center=MoPoint(262, y)), fill="black")

    print(f"save file {output_filename} ...")
    page.save_as(output_filename, pretty=True, indent=2)
    print("save done.")


if __name__ == "__main__":
    main()
