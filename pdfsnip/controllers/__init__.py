"""
Controllers for handling user interactions.
"""
from .region_controller import NO_TEXT_SELECTED, RegionController, SelectionMode

__all__ = ['RegionController', 'SelectionMode', 'NO_TEXT_SELECTED']
