"""Fund Data API service."""
