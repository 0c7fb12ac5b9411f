"""Falling sand - a block-chunked cellular automaton."""
