"""Image upload and serving routes on top of the blob store."""
