"""
FastAPI route definitions.
"""
