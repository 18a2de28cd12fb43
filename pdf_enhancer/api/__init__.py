"""HTTP API for the content enhancer."""
