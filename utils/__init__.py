"""
Utility modules
"""

from .input_parser import InputParser, PASTEL_COLORS, random_color, generate_id
from .visualization import Visualizer

__all__ = ['InputParser', 'PASTEL_COLORS', 'random_color', 'generate_id', 'Visualizer']
