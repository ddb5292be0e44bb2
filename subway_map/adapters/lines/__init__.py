"""Line adapters - Implementations of LineClassifierPort.

Available implementations:
- TableLineClassifier: Static line membership table lookup
"""

from .table_classifier import TableLineClassifier

__all__ = ["TableLineClassifier"]
