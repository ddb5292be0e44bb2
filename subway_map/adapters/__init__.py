"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Graph storage (JSON node documents)
- Route search (breadth-first search)
- Line classification (static membership tables)
- Rendering engines (Folium, Matplotlib)
"""
