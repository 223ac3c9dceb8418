"""
Configuration for indicator defaults and text-driven strategy descriptions.
"""
