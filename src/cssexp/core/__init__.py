"""
Core Package.

Contains the pipeline driver (`CssEngine`) and the `compile` entry point.
"""
