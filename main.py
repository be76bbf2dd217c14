"""
Entry point kept for running straight from a checkout: python main.py tickets.json
"""

from flightstats.pipeline import main_cli

if __name__ == '__main__':
    raise SystemExit(main_cli())
