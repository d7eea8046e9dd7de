"""
Output file generation.
"""

from .output_generator import OutputGenerator

__all__ = ['OutputGenerator']
