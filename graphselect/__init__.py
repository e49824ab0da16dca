"""
graphselect: rectangular node selection for force-graph renderers.
"""

__version__ = "1.0.0"
