"""Optimal tic-tac-toe via exhaustive minimax search."""
