"""Track blue, red and yellow markers through video frames and save their positions and spread."""

__version__ = "0.1.0"