"""Host adapters for the register list."""
