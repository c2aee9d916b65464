"""Domain layer: exceptions representing business rule violations."""
