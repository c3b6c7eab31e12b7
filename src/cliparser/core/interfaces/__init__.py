from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .parser import ArgumentParserProtocol

__all__ = [
    'ArgumentParserProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
