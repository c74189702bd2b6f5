"""Global configuration for gfshamir.

There is no runtime configuration beyond ``(t, n)`` at call time; these are
the fixed parameters of the field and the sharing scheme.
"""

# ---------- Finite field GF(2^8) ----------
# x^8 + x^4 + x^3 + x + 1 (the AES polynomial)
REDUCTION_POLYNOMIAL = 0x11B
FIELD_SIZE = 256
ELEMENT_MASK = 0xFF
ELEMENT_BITS = 8

# exp() scans this many candidate exponents (0 .. 254)
EXP_CANDIDATES = 255

# ---------- Shamir parameters ----------
# Participant indices are 1..n; x = 0 is reserved for the secret itself.
MAX_PARTICIPANTS = 255
MAX_THRESHOLD = 255
