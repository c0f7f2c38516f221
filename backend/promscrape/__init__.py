"""Prometheus text exposition scraper."""
