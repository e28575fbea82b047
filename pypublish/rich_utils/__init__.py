"""
Console rendering helpers.
"""
