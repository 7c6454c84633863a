"""Adapters layer - Concrete implementations of ports.

Adapters connect the application core to storage and the routing
engine. Each adapter implements one or more port protocols.
"""
