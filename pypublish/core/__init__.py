"""
Core services for pypublish.
"""
