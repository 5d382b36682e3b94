#!/usr/bin/env python3
"""Main CLI entry point for cricket scoring system."""

from cricket_scorer.cli.main import app

if __name__ == '__main__':
    app()
