"""
Record catalog and user wishlists.
"""
