"""Domain layer: entities, pure services, constants and exceptions."""
