"""Application layer: DTOs, ports (interfaces), and the file use case."""
