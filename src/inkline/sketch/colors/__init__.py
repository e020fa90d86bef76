from .modes import ColorMap

__all__ = ['ColorMap']
