"""Tree processors converting between nested trees and flat entries."""

from .flattener import Flattener, flatten
from .unflattener import Unflattener, unflatten

__all__ = ["Flattener", "Unflattener", "flatten", "unflatten"]
