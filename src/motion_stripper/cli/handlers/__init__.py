from .strip import handle_strip

__all__ = [
  "handle_strip",
]
