"""Pure row ↔ wire mappings, one module per API family."""
