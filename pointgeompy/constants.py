# Tolerance band used when checking whether a point lies on a line segment
SMALL = 0.9

# Segments with a squared length below this collapse to endpoint comparison
MIN_LINE_LENGTH_SQUARED = 1.0

VECTOR_TOLERANCE = 1e-9

POINT_STRING_PREFIX = "Pt @"
