"""Weight domain module.

Body-weight measurements: magnitude and unit value objects, the measurement
entity, and the repository port used by the weight tracker.
"""
