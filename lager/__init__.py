"""Reactive state, sensors, lens and merge nodes, writers, futures and serialization helpers."""

__version__ = "0.1.0"