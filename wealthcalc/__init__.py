"""SIP, lumpsum, SWP and goal projections for periodic investing."""

__version__ = "0.1.0"
