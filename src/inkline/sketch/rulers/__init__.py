from .base import BaseRuler
from .number_line import NumberLineRuler

__all__ = ['BaseRuler', 'NumberLineRuler']
