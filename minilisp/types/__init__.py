"""Runtime value types: atoms, pairs, callables and environments."""
