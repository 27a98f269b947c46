"""HTTP delivery layer for document rendering."""
