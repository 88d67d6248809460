"""Media capture collaborator boundary."""

from .base import AbstractMediaBackend
from .publisher import MediaPublisher
from .assembler import MediaAssembler

__all__ = [
    'AbstractMediaBackend',
    'MediaPublisher',
    'MediaAssembler'
]
