"""Qirkat: rules engine and alpha-beta opponent for the 5x5 capture game."""
