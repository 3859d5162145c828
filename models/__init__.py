"""
models/ - Domain Layer
======================
Plain dataclasses for the entities the repositories load and save.
"""
