"""Top-level package for the Fastest Delivery Path project.

This package exposes the modules used to find the fastest delivery
route between two cities of a road network: the shortest-path engine,
the road store, the application services and the HTTP surface.
"""
