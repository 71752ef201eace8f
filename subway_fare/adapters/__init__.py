"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the engine to network storage (CSV files) and to the
routing algorithm.
"""
