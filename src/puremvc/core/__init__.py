"""Core actors: Model, View and Controller."""

from .controller import Controller
from .model import Model
from .view import View

__all__ = ["Controller", "Model", "View"]
