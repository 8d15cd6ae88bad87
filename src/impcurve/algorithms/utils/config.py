"""Global numeric flags shared by the algorithms package."""

FASTMATH = False  # Global flag for Numba's fastmath option

# Relative magnitude below which a leading coefficient left over by the
# microbasis reduction is treated as cancellation residue.
TOL = 1e-12

# Hard cap on microbasis iterations; a well-formed curve of degree n needs
# at most n of them.
MAX_MICROBASIS_ITER = 1000
