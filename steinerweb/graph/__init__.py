"""Annotated graph arena.

`build_annotated_graph` wraps caller nodes and edges into index-addressed
records that carry the search state (`annotated`).
"""
