"""Land Boundary Engine.

Turns GPS walk fixes or tapped map points into validated field boundary
polygons, measures them (area in acres, perimeter in metres, centroid),
simplifies them for storage, and clusters many parcels for map overviews.
"""

__version__ = "0.1.0"
