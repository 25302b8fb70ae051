"""
AP Physics C topics offered by the question generator.
"""

MECHANICS_TOPICS = [
    "Newton's Laws",
    "Rotational Motion",
    "Oscillations",
    "Gravitation",
    "Fluid Mechanics",
    "Thermodynamics",
]

ELECTRICITY_TOPICS = [
    "Electric Fields",
    "Gauss's Law",
    "Electric Potential",
    "Capacitance",
    "Current and Resistance",
    "DC Circuits",
    "Magnetic Fields",
    "Electromagnetic Induction",
    "AC Circuits",
]

TOPICS = MECHANICS_TOPICS + ELECTRICITY_TOPICS
