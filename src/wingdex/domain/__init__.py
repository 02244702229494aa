"""Pure domain layer: taxonomy resolution and life-list aggregation."""
