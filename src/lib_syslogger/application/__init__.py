"""Application layer: composable wrappers and session use cases."""
