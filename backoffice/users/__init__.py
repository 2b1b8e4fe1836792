"""User-management filter state and listing queries."""
