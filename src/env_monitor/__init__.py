"""Console monitor for global seismic activity and local lightning risk."""

__version__ = "0.1.0"
