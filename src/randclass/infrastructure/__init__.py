"""Infrastructure layer: filesystem discovery and dynamic module loading.

This layer depends on stdlib and the domain layer's models and errors.
It must never import from services, commands, or output.
"""

from randclass.infrastructure.loader import Loader

__all__ = ["Loader"]
