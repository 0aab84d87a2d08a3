"""Summary publication and recompute scheduling."""
