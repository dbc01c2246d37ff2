# sortedstack/__init__.py
from .core.sorted_stack import SortedIntegerStack
from .utils.simpleStack import SimpleStack

__version__ = "1.0.0"
__all__ = ["SortedIntegerStack", "SimpleStack"]
