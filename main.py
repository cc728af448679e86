#!/usr/bin/env python3
"""
Motion Task Proxy - Main Entry Point

    python main.py serve        # start the proxy on PORT (default 3000)
    python main.py --help       # terminal task form commands
"""
from dotenv import load_dotenv

from src.client.cli import cli


if __name__ == "__main__":
    load_dotenv()
    cli()
