"""Monetary domain package.

This package contains the `Money` value type: an amount of an opaque currency
tag held as an exact fixed-point integer, with round-half-to-even arithmetic.
"""
