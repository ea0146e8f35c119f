"""Tic-tac-toe engine with an append-only match archive."""
