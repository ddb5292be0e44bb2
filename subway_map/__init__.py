"""Top-level package for the campus subway map.

This package loads the campus network, computes minimum-hop routes
between two locations with breadth-first search and classifies each
route into coloured lines with transfer points.
"""
