"""
Core package for Almanac.

Configuration, logging and exception classes shared by every builder.
"""
