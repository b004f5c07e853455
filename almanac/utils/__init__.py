"""
Utilities package for Almanac.

- slugify: Label to slug normalization
- dates: Effective dates, month names, date coercion
"""
