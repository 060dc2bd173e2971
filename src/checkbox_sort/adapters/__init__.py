"""Host adapters that feed clicks into the sorting core."""
