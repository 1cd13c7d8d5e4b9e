"""Steiner tree algorithms: frontier search, connectivity repair, normalization."""
