from .sink import Sink

__all__ = ["Sink"]
