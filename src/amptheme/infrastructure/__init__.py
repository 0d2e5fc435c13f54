"""Infrastructure layer — lxml DOM helpers, hook registry and host collaborators."""
