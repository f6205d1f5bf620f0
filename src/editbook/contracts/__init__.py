"""Contracts module - protocols for cross-layer communication."""

from .validators import Validator as Validator

__all__ = ["Validator"]
