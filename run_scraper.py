"""Convenience shim to run the issue URL scraper."""

from __future__ import annotations

import sys

from src.issue_scraper.runner import main as scraper_main


if __name__ == "__main__":
    scraper_main(sys.argv[1:])
