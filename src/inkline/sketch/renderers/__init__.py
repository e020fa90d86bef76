from .number_line import NumberLineRenderer

__all__ = ['NumberLineRenderer']
