"""
Users and their record collections.
"""
