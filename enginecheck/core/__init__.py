"""Core — models, config, domain logic and use cases."""
