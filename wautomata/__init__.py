"""Weighted automata, push-down runs, coarse-to-fine recognition and PMCFG derivation tools."""

__version__ = "0.1.0"