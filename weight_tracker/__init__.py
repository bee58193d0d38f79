"""Weight tracker client: current value controller and series chart."""

__version__ = "0.1.0"
