#!/usr/bin/env python3
"""
Entry point for running subnet_topo as a module
This allows running: python -m subnet_topo
"""

from subnet_topo.cli import app

if __name__ == "__main__":
    app()
