"""svg2polylines - Convert SVG path geometry to polylines.

svg2polylines reads the path data of an SVG document and converts every path
into polylines (polygonal chains): ordered lists of points that approximate
straight segments, Bezier curves and elliptical arcs within a configurable
tolerance. This is the geometry a pen plotter, laser cutter or drawing robot
needs, since those only move in straight lines between pen-up and pen-down.

Example:
    >>> import svg2polylines
    >>> [line.to_tuples() for line in svg2polylines.flatten_path_data("M0,0 L10,0 L10,10 Z")]
    [[(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 0.0)]]

The command-line tool converts whole documents:

    $ svg2polylines drawing.svg --json
"""

__version__ = "0.4.0"
__author__ = "svg2polylines contributors"

from svg2polylines.api import flatten_path_data, parse  # noqa: E402

__all__ = ["__author__", "__version__", "flatten_path_data", "parse"]
