"""ExoDetect - exoplanet transit signal analysis service."""

__version__ = "1.0.0"
