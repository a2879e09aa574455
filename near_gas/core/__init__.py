"""
Core domain models, integer primitives, and serialization contracts.

Everything here is pure and synchronous: no I/O beyond the caller-supplied
strings and bytes.
"""
