"""Infrastructure layer: search backend adapters and their exceptions."""
