"""Bit sets, convolutional encoder trellises with Viterbi decoding, a binary symmetric channel and a bit-error-rate simulation."""

__version__ = "0.1.0"

__all__ = ["bitset", "trellis", "channel", "file_tools", "simulation"]