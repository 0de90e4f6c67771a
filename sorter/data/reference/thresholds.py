"""
Sorting Thresholds

Fixed handling limits for the sorting line. All comparisons are inclusive.
"""

# Bulky
VOLUME_CM3 = 1_000_000.0      # Width x height x length (cubic centimeters)
DIMENSION_CM = 150.0          # Any single side (centimeters)

# Heavy
MASS_KG = 20.0                # Package mass (kilograms)
