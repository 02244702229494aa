"""Adapters between the pure domain and files, CSV checklists and JSON snapshots."""
