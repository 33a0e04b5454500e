"""Core constants: input bounds, result cap, and user-facing messages.

Shared by validation, the search repository and HTTP responses so the
limits and wording stay in one place.
"""

# Input bounds (query length is measured after trimming, before sanitization)
MAX_QUERY_LENGTH = 200
MAX_RECORD_ID_LENGTH = 100

# Hard cap on hits per search; there is no pagination cursor.
MAX_SEARCH_RESULTS = 100

# Validation messages
SEARCH_QUERY_REQUIRED = "Search query is required"
SEARCH_QUERY_EMPTY = "Search query cannot be empty"
SEARCH_QUERY_TOO_LONG = f"Search query cannot exceed {MAX_QUERY_LENGTH} characters"
RECORD_ID_REQUIRED = "Document ID is required"
RECORD_ID_EMPTY = "Document ID cannot be empty"
RECORD_ID_TOO_LONG = f"Document ID cannot exceed {MAX_RECORD_ID_LENGTH} characters"
RECORD_ID_INVALID_FORMAT = "Invalid document ID format"

# Backend / result messages
RECORD_NOT_FOUND = "Document not found"
SEARCH_FAILED = "Failed to execute search"
DELETE_FAILED = "Failed to delete document"
SEARCH_BACKEND_UNAVAILABLE = "Search backend is not available"
RECORD_MARKED_DELETED = "Document marked as deleted"

# Health
SERVER_RUNNING = "Server is running"
SERVER_DEGRADED = "Server is running but Elasticsearch is unavailable"
BACKEND_CONNECTED = "connected"
BACKEND_DISCONNECTED = "disconnected"
