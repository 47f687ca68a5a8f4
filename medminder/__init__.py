"""
MedMinder core.

Dose generation, adherence tracking and drug-interaction detection for a
medication-adherence tracker used by seniors and their caregivers.
"""

__version__ = "0.1.0"
