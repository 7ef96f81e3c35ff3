"""Routing: compiled route table and the path resolver.

Routes are registered once and compiled into an immutable lookup
structure before the navigator starts resolving paths.
"""
