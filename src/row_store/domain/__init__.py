"""Domain layer - rows, pages, tables and the row codec."""
