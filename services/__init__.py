"""
services/ - Business Logic Layer
================================
Services combine repositories and turn their results into display text.
"""
