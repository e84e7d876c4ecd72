"""
Graph, trace and result models.
"""
