"""Application layer - services that orchestrate the domain."""
