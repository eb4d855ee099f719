"""
Infrastructure services: rendering backends and the event loop.
"""
