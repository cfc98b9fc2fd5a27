"""Domain layer: identifiers, response models, errors and ports."""
