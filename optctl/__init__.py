"""Cost functions, evaluable matrices, labelled states and input trajectories for discrete-time optimal control."""

__version__ = "0.1.0"
__all__ = ["common", "cost", "trajectory"]