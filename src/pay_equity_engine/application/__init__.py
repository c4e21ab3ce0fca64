"""File-based use cases wrapping the pure analysis domain."""
