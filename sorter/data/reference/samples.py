"""
Sample Packages

Labeled packages shown by the sample driver, one per handling outcome.
Tuple layout: (description, width_cm, height_cm, length_cm, mass_kg)
"""

SAMPLES = [
    ("Standard package", 50.0, 50.0, 50.0, 10.0),
    ("Bulky by volume", 100.0, 100.0, 100.0, 10.0),
    ("Bulky by dimension", 160.0, 50.0, 50.0, 10.0),
    ("Heavy package", 50.0, 50.0, 50.0, 25.0),
    ("Bulky and heavy", 160.0, 50.0, 50.0, 25.0),
]
