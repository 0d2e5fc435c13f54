"""Output layer — Rich/JSON rendering of service results."""
