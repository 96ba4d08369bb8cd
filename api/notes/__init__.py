"""
Free-form notes.
"""
