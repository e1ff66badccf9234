"""Discrete event simulation with DEVS models, connectors and output analysis."""

__version__ = "0.13.1"

__all__ = ["coupling", "errors", "output_analysis", "services", "simulator", "t_scores", "utils"]