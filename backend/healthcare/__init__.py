"""Healthcare records service: doctors, patients and appointments."""

__version__ = "0.1.0"
