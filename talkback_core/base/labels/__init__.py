"""Toggle state label resolution."""

from .state_labels import StateLabelPair, StateLabels

__all__ = ["StateLabelPair", "StateLabels"]
