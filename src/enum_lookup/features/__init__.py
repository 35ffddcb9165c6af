"""Feature modules for enum-lookup."""
