
"""Number of parallel slices used by the scan-line integrator and the
plastic modulus solver. Accuracy improves and cost grows linearly."""
SCAN_STEPS = 2000

"""Number of straight segments replacing one curved polygon edge."""
ARC_SEGMENTS = 32

"""Number of vertices of the regular polygon replacing a circle part."""
CIRCLE_SEGMENTS = 128

"""Determinant magnitude below which three points count as collinear."""
COLLINEAR_TOLERANCE = 1e-5
