"""
The VIEW layer: Qt widgets that implement the host surface and live
representation contracts, and the per-entity list panels built on them.
"""
