"""Schelling segregation model on a square cellular automaton grid."""

__version__ = "0.1.0"
