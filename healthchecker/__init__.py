"""Health chat backend with AI replies and medical report summaries."""
