"""Domain models, constants and configuration for the resume match scoring engine."""
