"""
Two-level bucketed item container.

Modules are grouped into item data and providers, the bucketed storage core,
reporting helpers, and utilities so drivers and tests can compose them freely.
"""
