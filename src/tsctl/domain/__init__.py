"""Domain layer — format tokens, layouts, instants and the converter.

This layer depends only on the standard library (``zoneinfo`` for the IANA
database). It must never import from services, config, commands, or output.
"""
