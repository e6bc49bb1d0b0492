"""
Core utilities — call-site resolution and package exceptions.
"""
