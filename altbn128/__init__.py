"""Fields, the groups G1 and G2, and the optimal ate pairing on the alt_bn128 curve."""

__version__ = "0.1.0"
__all__ = ["fields", "g1", "g2", "pairing", "pp"]