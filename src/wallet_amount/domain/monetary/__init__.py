"""Monetary domain package.

This package contains the `Amount` value object used by the wallet UI, the `Currency`
descriptors it refers to, and the display preferences that control how amounts are
formatted without touching the stored subunit value.
"""
