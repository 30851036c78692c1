"""
Server services: authentication and dependency providers.
"""
