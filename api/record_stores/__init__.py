"""
Record stores and users' favourite stores.
"""
