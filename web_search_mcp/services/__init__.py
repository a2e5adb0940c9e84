"""Business logic: query intent classification and search dispatch."""
