"""Exceptions raised by the handle extractors."""

from __future__ import annotations


class InvalidArgumentError(TypeError):
    """Raised when an extractor is called with a structurally wrong argument."""

    def __init__(self, parameter: str, expected: str):
        self.parameter = parameter
        self.expected = expected
        super().__init__(f'The "{parameter}" parameter must be {expected}')
