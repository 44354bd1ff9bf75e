"""Infrastructure layer: document store clients, repositories, security."""
