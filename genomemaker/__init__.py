"""Synthetic genomes and simulated sequencer reads."""

__version__ = '0.1.0'
