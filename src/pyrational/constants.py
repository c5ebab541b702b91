"""Named numerical constants for the rational interpolation tableau."""

# Added to the initial ``d`` column so the first recursion level never sees 0/0.
TINY = 1.0e-15

# 2^-52, spacing of doubles just above 1.0
MACHINE_EPSILON = 2.220446049250313e-16

# Tolerance shared by the exact-node shortcut and the pole test.
DEFAULT_RELATIVE_ACCURACY = 10.0 * MACHINE_EPSILON
