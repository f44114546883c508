"""Core geometry implementation: primitives, shapes and classification."""
