"""SVG page collecting shapes as path elements, written with svgwrite."""

from __future__ import annotations

import gzip
import io
import logging
from typing import List, Optional, Sequence

import svgwrite
import svgwrite.path

from mosaico.geom import MoBox
from mosaico.path_measure import PathMeasure
from mosaico.shape import MoShape
from mosaico.svgpath import MoSvgPath

logger = logging.getLogger(__name__)


class MoSvgPage:
    """A page (canvas) described by SVG with a viewbox to draw inside.

    The viewbox uses screen coordinates: x left-to-right, y top-to-bottom,
    which is the coordinate system MoPath and the shapes draw in.
    """

    drawing: svgwrite.Drawing

    def __init__(self, width: str, height: str, viewbox: MoBox):
        """
        Initialize the page.

        Args:
            width (str): width of the page including unit, e.g. "120mm" or "400px"
            height (str): height of the page including unit
            viewbox (MoBox): the region of the drawing coordinates shown on the page
        """
        self.viewbox = viewbox
        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(width, height),
            viewBox=f"{viewbox.xmin} {viewbox.ymin} {viewbox.width} {viewbox.height}",
            profile="full",
        )
        self.path_strings: List[str] = []

    def add_path(self, path_string: str, **attributes) -> svgwrite.path.Path:
        """Add a path element with the given path data.

        Args:
            path_string (str): path data
            **attributes: SVG presentation attributes (svgwrite naming, e.g. fill_rule)

        Returns:
            svgwrite.path.Path: the added element
        """
        attributes.setdefault("fill_rule", "evenodd")
        self.path_strings.append(path_string)
        return self.drawing.add(self.drawing.path(d=path_string, **attributes))

    def add_shape(
        self,
        shape: MoShape,
        precision: Optional[int] = None,
        affine_trafo: Optional[Sequence[float]] = None,
        **attributes,
    ) -> svgwrite.path.Path:
        """Draw _shape_ into a new path and add it as path element.

        Args:
            shape (MoShape): the shape to draw
            precision (Optional[int], optional): digits kept per number. Defaults to None.
            affine_trafo (Optional[Sequence[float]], optional): [a00, a01, a10, a11, b0, b1]
                placing the shape on the page, e.g. a scale and offset of a chart.
                Defaults to None.
            **attributes: SVG presentation attributes

        Returns:
            svgwrite.path.Path: the added element
        """
        path_string = shape.to_path_string(precision)
        if affine_trafo is not None:
            path_string = MoSvgPath.transform_path_string(path_string, affine_trafo)
        return self.add_path(path_string, **attributes)

    def content_box(self) -> Optional[MoBox]:
        """Bounding box of all added paths, None if nothing was drawn."""
        box: Optional[MoBox] = None
        for path_string in self.path_strings:
            if not PathMeasure.parse(path_string):
                continue
            path_box = PathMeasure.bounding_box(path_string)
            box = path_box if box is None else box.union(path_box)
        return box

    def fit_to_content(self, margin: float = 0.0) -> MoBox:
        """Set the viewbox to the bounding box of the added paths grown by _margin_.

        Returns:
            MoBox: the new viewbox (unchanged if nothing was drawn)
        """
        box = self.content_box()
        if box is not None:
            self.viewbox = box.expand(margin)
            self.drawing.viewbox(self.viewbox.xmin, self.viewbox.ymin, self.viewbox.width, self.viewbox.height)
        return self.viewbox

    def to_string(self, pretty: bool = False, indent: int = 2) -> str:
        """The SVG document as string."""
        svg_buffer = io.StringIO()
        self.drawing.write(svg_buffer, pretty=pretty, indent=indent)
        return svg_buffer.getvalue()

    def save_as(self, filename: str, pretty: bool = False, indent: int = 2, compressed: bool = False):
        """Save as SVG file

        Args:
            filename (str): path and filename
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        output_data = self.to_string(pretty=pretty, indent=indent).encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)

        logger.debug("saving %d paths to %s", len(self.path_strings), filename)
        with open(filename, "wb") as svg_file:
            svg_file.write(output_data)

    @classmethod
    def create_page_for_box(cls, box: MoBox, scale: float = 1.0, unit: str = "px") -> MoSvgPage:
        """
        Create a page showing exactly _box_.

        Args:
            box (MoBox): region of the drawing coordinates to show
            scale (float, optional): page units per drawing unit. Defaults to 1.0.
            unit (str, optional): unit of the page size. Defaults to "px".

        Returns:
            MoSvgPage: the new page
        """
        return cls(f"{box.width * scale}{unit}", f"{box.height * scale}{unit}", box)
