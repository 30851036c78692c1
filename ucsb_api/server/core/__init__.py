"""
Server core: configuration, constants and database wiring.
"""
