"""
git-utils - Interactive git helpers
"""

from .__version__ import __version__
from .session import Session
from .cli.main import main

__all__ = ["Session", "main", "__version__"]
