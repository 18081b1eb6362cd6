"""
Core value types and text grammars.

This module contains the TextArgument value object and the literal grammars
it parses with. Nothing here performs I/O or holds mutable state.
"""
