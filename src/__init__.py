"""
Movie Club - Source Package

This package contains the core functionality for the SPACE film rating app:
- review_store: Review collection, persistence and derived views
- score_distribution: Pooled score counts across all reviews
- calibration: Chi-squared calibration check and advisory messages
- mode_benchmark: Peer-group modal scores for benchmarking a film
- dimension_insights: Per-dimension deep dive statistics
- review_export: CSV export and share text
- film_catalog: TMDB search and film details
- local_storage: Durable local key-value storage
- seed_data: Sample reviews
- utils: Rubric constants and validation helpers
"""
