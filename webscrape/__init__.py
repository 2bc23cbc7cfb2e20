"""webscrape — validated client for a remote web scraping service."""

__version__ = "0.1.0"
