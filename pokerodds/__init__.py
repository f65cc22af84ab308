"""
pokerodds: Hold'em hand-category odds and call EV

Estimates, for a partially revealed board, the probability of finishing
with each of the ten hand categories (exactly when one or two community
cards are missing, by Monte Carlo sampling otherwise) and turns that
distribution into an expected value for a fixed-price call.
"""

__version__ = "0.1.0"
