"""Chapter list scraper for archiveofourown.org."""

__version__ = "0.1.0"
