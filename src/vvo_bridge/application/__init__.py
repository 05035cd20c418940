"""Application layer - normalization and endpoint mappers."""

from vvo_bridge.application.normalizer import Normalizer

__all__ = ["Normalizer"]
