"""Domain layer: models, selection and formatting."""
