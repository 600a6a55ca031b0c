"""
Generated entity base classes
"""
