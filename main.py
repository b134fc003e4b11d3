#!/usr/bin/env python3
"""Geth setup step entry point"""

from setup_geth.cli import app

if __name__ == "__main__":
    app()
