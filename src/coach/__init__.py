"""coach: personal training plans, macro targets and strength routines."""

__version__ = "0.1.0"
