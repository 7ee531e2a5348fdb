"""Chess board model with move validation, occupancy-map move parsing and move forwarding over TCP."""

__version__ = "0.1.0"