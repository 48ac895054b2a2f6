"""
Fixed values shared across the service.

MAPPING_TTL is intentionally NOT part of Settings: every mapping lives for
exactly six hours after it was last written.
"""

from datetime import timedelta

# Note: a real deployment would rather keep mappings forever in a primary
# database and let an LRU policy evict cold keys from the key-value store.
MAPPING_TTL = timedelta(hours=6)

SHORT_CODE_LENGTH = 8
