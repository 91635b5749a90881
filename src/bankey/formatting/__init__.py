"""Currency formatting package.

Turns decimal amounts into the three display segments (symbol, grouped integer,
fraction) consumed by presentation layers.
"""
