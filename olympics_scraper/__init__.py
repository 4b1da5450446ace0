"""Paris 2024 schedule and medal scraper."""
