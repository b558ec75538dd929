"""
Core domain models, formatting primitives and output contracts.

Independent of the calendar computation layer: everything here operates on
plain milliseconds, datetimes and the declared calendar capability contract.
"""
