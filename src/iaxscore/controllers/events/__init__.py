from .iteration_event import IterationEvent

__all__ = ["IterationEvent"]
