"""
Application-wide constants.
"""

PROJECT_NAME = "UCSB Example API"
API_PREFIX = "/api"
API_VERSION = "1.0.0"
SCHEMA_VERSION = "v1"

ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"

# Generated ids are signed 64-bit integers in every supported database
MIN_ENTITY_ID = -(2**63)
MAX_ENTITY_ID = 2**63 - 1
