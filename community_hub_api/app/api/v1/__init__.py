"""
Version 1 of the Community Hub API.
"""
