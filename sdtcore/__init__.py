"""Sound synthesis building blocks: DSP helpers, complex-number helpers, impact control layers and zero-crossing analysis."""

__version__ = "0.1.0"
__all__ = ["analysis", "common", "complexnum", "control"]