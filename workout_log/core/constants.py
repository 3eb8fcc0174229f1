"""Application constants."""

# Upper bound of the 32-bit signed integer columns (ids, reps)
MAX_STORED_INT = 2**31 - 1
