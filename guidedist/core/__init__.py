"""Core layer — models, config, services, persistence, use cases."""
